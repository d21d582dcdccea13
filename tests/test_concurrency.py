"""
Concurrency tests.

Every search builds its own graph, heuristic and node arena, so calls
issued in parallel share no mutable state and must agree with a serial
run.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.data.cities import CITIES
from src.domain.enums import AlgorithmType
from src.domain.planner import RoutePlanner

PAIRS = [
    ("Tbilisi", "Batumi"),
    ("Zugdidi", "Telavi"),
    ("Poti", "Rustavi"),
    ("Akhaltsikhe", "Mtskheta"),
]


class TestParallelSearches:
    def setup_method(self):
        self.planner = RoutePlanner(CITIES)

    def test_threads_match_serial_results(self):
        jobs = [(s, g, alg) for s, g in PAIRS for alg in AlgorithmType] * 5
        serial = [self.planner.find_path(*job) for job in jobs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(lambda job: self.planner.find_path(*job), jobs))

        assert parallel == serial

    @pytest.mark.asyncio
    async def test_event_loop_offload(self):
        loop = asyncio.get_running_loop()
        results = await asyncio.gather(
            *(
                loop.run_in_executor(None, self.planner.find_path, s, g)
                for s, g in PAIRS
            )
        )
        for (start, goal), result in zip(PAIRS, results):
            assert result.path[0] == start
            assert result.path[-1] == goal

    def test_locations_are_not_mutated(self):
        before = list(CITIES)
        for start, goal in PAIRS:
            self.planner.find_path(start, goal)
        assert list(CITIES) == before

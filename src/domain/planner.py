"""
Route planner facade.

Wraps the pure graph / search functions for callers that hold a location
list (the API layer, scripts).  Unlike the engines it validates start and
goal up front and raises ``LocationNotFound`` instead of failing on a
missing graph key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .entities import Location, LocationNotFound, PathfindingResult
from .enums import AlgorithmType
from .graph import build_graph, build_heuristic, path_distance
from .pathfinding import find_path_astar, find_path_iddfs

logger = logging.getLogger(__name__)


class RoutePlanner:
    """High-level API used by the route endpoints."""

    def __init__(self, locations: Iterable[Location]):
        self._locations: tuple[Location, ...] = tuple(locations)
        self._by_name = {loc.name: loc for loc in self._locations}

    @property
    def locations(self) -> tuple[Location, ...]:
        return self._locations

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Location:
        try:
            return self._by_name[name]
        except KeyError:
            raise LocationNotFound(name) from None

    def find_path(
        self,
        start: str,
        goal: str,
        algorithm: AlgorithmType = AlgorithmType.ASTAR,
    ) -> PathfindingResult:
        """Validate both endpoints, then run *algorithm* on a fresh graph."""
        algorithm = AlgorithmType(algorithm)
        for name in (start, goal):
            if name not in self._by_name:
                raise LocationNotFound(name)

        graph = build_graph(self._locations)
        if algorithm is AlgorithmType.ASTAR:
            heuristic = build_heuristic(self._locations, goal)
            result = find_path_astar(graph, heuristic, start, goal)
        else:
            result = find_path_iddfs(graph, start, goal)

        if result.found:
            logger.info(
                "%s %s -> %s: %d stops, %.1f km, %d nodes explored",
                algorithm.value,
                start,
                goal,
                len(result.path),
                result.distance,
                result.nodes_explored,
            )
        else:
            logger.warning(
                "%s %s -> %s: no path (%d nodes explored)",
                algorithm.value,
                start,
                goal,
                result.nodes_explored,
            )
        return result

    def straight_line_distance(self, path: Sequence[str]) -> float:
        """Total great-circle length of *path* through the complete graph."""
        for name in path:
            if name not in self._by_name:
                raise LocationNotFound(name)
        return path_distance(path, build_graph(self._locations))

"""Unit tests for the route planner facade and the city catalogue."""

import logging

import pytest

from src.data.cities import CITIES, cities_in_region, search_cities
from src.domain.entities import Location, LocationNotFound
from src.domain.enums import AlgorithmType
from src.domain.planner import RoutePlanner


class TestRoutePlanner:
    def setup_method(self):
        self.planner = RoutePlanner(CITIES)

    def test_astar_by_default(self):
        result = self.planner.find_path("Tbilisi", "Batumi")
        assert result.algorithm == AlgorithmType.ASTAR
        assert result.path[0] == "Tbilisi"
        assert result.path[-1] == "Batumi"

    def test_iddfs(self):
        result = self.planner.find_path("Tbilisi", "Batumi", AlgorithmType.IDDFS)
        assert result.algorithm == AlgorithmType.IDDFS
        assert result.path == ["Tbilisi", "Batumi"]

    def test_accepts_plain_string_algorithm(self):
        result = self.planner.find_path("Gori", "Poti", "iddfs")
        assert result.algorithm == AlgorithmType.IDDFS

    def test_unknown_start_raises(self):
        with pytest.raises(LocationNotFound) as exc_info:
            self.planner.find_path("Atlantis", "Batumi")
        assert exc_info.value.name == "Atlantis"

    def test_unknown_goal_raises(self):
        with pytest.raises(LocationNotFound) as exc_info:
            self.planner.find_path("Batumi", "El Dorado", AlgorithmType.IDDFS)
        assert exc_info.value.name == "El Dorado"

    def test_contains_and_get(self):
        assert "Kutaisi" in self.planner
        assert "Kyiv" not in self.planner
        assert self.planner.get("Kutaisi").region == "Imereti"
        with pytest.raises(LocationNotFound):
            self.planner.get("Kyiv")

    def test_straight_line_distance_matches_astar(self):
        result = self.planner.find_path("Zugdidi", "Telavi")
        assert self.planner.straight_line_distance(result.path) == pytest.approx(
            result.distance
        )

    def test_straight_line_distance_empty_path(self):
        assert self.planner.straight_line_distance([]) == 0.0

    def test_near_antipodal_cities(self):
        planner = RoutePlanner([Location("P", -82.0, 0.0), Location("Q", 82.0, 180.0)])
        result = planner.find_path("P", "Q")
        assert result.path == ["P", "Q"]
        assert result.distance == pytest.approx(20_015.09, abs=1.0)

    def test_logs_search(self, caplog):
        with caplog.at_level(logging.INFO, logger="src.domain.planner"):
            self.planner.find_path("Tbilisi", "Rustavi")
        assert "Tbilisi -> Rustavi" in caplog.text


class TestCityCatalogue:
    def test_names_are_unique(self):
        names = [c.name for c in CITIES]
        assert len(names) == len(set(names))

    def test_every_city_has_region(self):
        assert all(c.region for c in CITIES)

    def test_search_is_case_insensitive(self):
        assert [c.name for c in search_cities("BATU")] == ["Batumi"]

    def test_search_substring(self):
        names = {c.name for c in search_cities("ta")}
        assert names == {"Kutaisi", "Rustavi", "Zestaponi", "Mtskheta"}

    def test_empty_search_returns_nothing(self):
        assert search_cities("") == []

    def test_region_filter(self):
        names = {c.name for c in cities_in_region("Adjara")}
        assert names == {"Batumi", "Kobuleti"}

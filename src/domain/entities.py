"""
Domain value objects shared by the pathfinding core and the API layer.

- ``Location`` is immutable reference data; the core never mutates it.
- ``PathfindingResult`` is created once per search and returned as-is.
  An empty ``path`` is the "no route" sentinel: callers check
  ``result.found`` instead of catching an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .enums import AlgorithmType

# name -> {neighbour name -> edge weight in km}
Graph = dict[str, dict[str, float]]
# name -> estimated remaining km to a fixed goal
Heuristic = dict[str, float]


class LocationNotFound(Exception):
    """Raised when a requested start or goal is not a known location."""

    def __init__(self, name: str):
        super().__init__(f"Unknown location: {name!r}")
        self.name = name


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    name: str
    lat: float
    lng: float
    region: Optional[str] = None


@dataclass(frozen=True)
class PathfindingResult:
    path: list[str]
    distance: float
    nodes_explored: int
    algorithm: AlgorithmType

    @property
    def found(self) -> bool:
        return len(self.path) > 0

    @classmethod
    def not_found(
        cls, nodes_explored: int, algorithm: AlgorithmType
    ) -> PathfindingResult:
        return cls(path=[], distance=0.0, nodes_explored=nodes_explored,
                   algorithm=algorithm)


@dataclass(frozen=True)
class RoadRoute:
    """Road geometry and length returned by the external routing service."""

    geometry: list[tuple[float, float]] = field(default_factory=list)
    distance_km: float = 0.0

    @property
    def available(self) -> bool:
        return bool(self.geometry) and self.distance_km > 0

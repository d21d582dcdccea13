"""
Route graph construction and path utilities
===========================================

The route graph is **complete**: every location is connected to every
other location, and the edge weight is the great-circle distance between
them.  Graph and heuristic are rebuilt for every search request from the
caller's location list; nothing is cached between calls.

Complexity
----------
* ``build_graph``      -- O(n^2) distance computations for n locations
* ``build_heuristic``  -- O(n)
* ``path_distance``    -- O(k) for a path of k stops
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .distance import location_distance
from .entities import Graph, Heuristic, Location

# Flat average speed used for travel-time estimates.  Not configurable:
# displayed times must stay comparable across deployments.
AVERAGE_SPEED_KMH = 60.0


def build_graph(locations: Sequence[Location]) -> Graph:
    """
    Build the complete weighted graph keyed by location name.

    Names must be unique; on duplicates the last entry wins.
    """
    graph: Graph = {}
    for origin in locations:
        graph[origin.name] = {}
        for dest in locations:
            if origin.name != dest.name:
                graph[origin.name][dest.name] = location_distance(origin, dest)
    return graph


def build_heuristic(locations: Sequence[Location], goal_name: str) -> Heuristic:
    """
    Map every location to its straight-line distance to *goal_name*.

    An unknown goal yields an empty mapping rather than an error.  The A*
    engine reads missing entries as 0, which degrades it to uniform-cost
    search, so callers must check the goal exists before trusting the
    estimates.
    """
    goal = next((loc for loc in locations if loc.name == goal_name), None)
    if goal is None:
        return {}
    return {loc.name: location_distance(loc, goal) for loc in locations}


def path_distance(path: Sequence[str], graph: Graph) -> float:
    """Sum the edge weights along *path*; 0 for paths of one stop or fewer."""
    total = 0.0
    for here, there in zip(path, path[1:]):
        total += graph[here][there]
    return total


def estimated_travel_time(distance_km: float) -> float:
    """Hours needed to cover *distance_km* at ``AVERAGE_SPEED_KMH``."""
    return distance_km / AVERAGE_SPEED_KMH


# ── Display helpers ───────────────────────────────────────────────────


def format_distance(distance_km: float) -> str:
    return f"{distance_km:.1f} km"


def format_time(hours: float) -> str:
    """Render *hours* as ``"45 min"`` or ``"2h 5min"``."""
    whole_hours = math.floor(hours)
    # half-up, not round()'s banker's rounding
    minutes = math.floor((hours - whole_hours) * 60 + 0.5)
    if whole_hours == 0:
        return f"{minutes} min"
    return f"{whole_hours}h {minutes}min"

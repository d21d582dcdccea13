"""
Great-circle distance using the Haversine formula.

Every edge weight in the route graph and every heuristic estimate is a
straight-line distance over the Earth's surface.  Real road distances come
from the external routing service (see ``src.infrastructure.routing_client``)
and never enter the search itself.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Location

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # rounding can push a past 1 for near-antipodal points
    a = min(1.0, a)
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def location_distance(a: Location, b: Location) -> float:
    return haversine_km(a.lat, a.lng, b.lat, b.lng)

"""
Road routing client (OSRM ``/route`` service).

The external service is an opaque collaborator: given an ordered list of
stops it returns a road polyline and a road distance.  Failures never
propagate to the caller; they are logged and an empty ``RoadRoute`` is
returned so the straight-line result can still be shown.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

import httpx

from src.domain.entities import Location, RoadRoute

logger = logging.getLogger(__name__)


class RoutingClient:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        profile: str = "driving",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def aclose(self) -> None:
        await self._client.aclose()

    def route_url(self, locations: Sequence[Location]) -> str:
        # OSRM expects lng,lat pairs separated by ';'
        coords = ";".join(f"{loc.lng},{loc.lat}" for loc in locations)
        return f"{self.base_url}/route/v1/{self.profile}/{coords}"

    async def fetch_road_route(self, locations: Sequence[Location]) -> RoadRoute:
        """Return the road route through *locations*, or an empty route."""
        if len(locations) < 2:
            return RoadRoute()

        url = self.route_url(locations)
        try:
            resp = await self._client.get(
                url, params={"overview": "full", "geometries": "geojson"}
            )
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError):
            logger.warning("Road route request failed: %s", url, exc_info=True)
            return RoadRoute()

        routes = data.get("routes") if isinstance(data, dict) else None
        if not routes:
            logger.warning(
                "Routing service returned no route (code=%s)",
                data.get("code") if isinstance(data, dict) else None,
            )
            return RoadRoute()

        best = routes[0]
        try:
            geometry = [
                (float(lat), float(lng))
                for lng, lat in best["geometry"]["coordinates"]
            ]
            distance_km = float(best["distance"]) / 1000
        except (KeyError, TypeError, ValueError):
            logger.warning("Malformed route payload from routing service")
            return RoadRoute()

        return RoadRoute(geometry=geometry, distance_km=distance_km)

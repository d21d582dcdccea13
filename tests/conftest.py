"""
Shared test fixtures.

The API client runs against the real app with the road routing client
replaced by an ``AsyncMock`` so tests never touch the network.  Note that
httpx's ``ASGITransport`` does not run lifespan events, so the routing
client dependency is always overridden here.
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.domain.entities import Location, RoadRoute


# ── Location sets ─────────────────────────────────────────────────────


@pytest.fixture
def line_locations() -> list[Location]:
    """Three points one degree apart on the equator."""
    return [
        Location("A", 0.0, 0.0),
        Location("B", 0.0, 1.0),
        Location("C", 0.0, 2.0),
    ]


@pytest.fixture
def four_cities() -> list[Location]:
    return [
        Location("Tbilisi", 41.7151, 44.8271, "Tbilisi"),
        Location("Kutaisi", 42.2500, 42.7000, "Imereti"),
        Location("Batumi", 41.6168, 41.6367, "Adjara"),
        Location("Gori", 41.9844, 44.1125, "Shida Kartli"),
    ]


# ── API client ────────────────────────────────────────────────────────


ROAD_ROUTE = RoadRoute(
    geometry=[(41.7151, 44.8271), (41.9, 43.9), (42.25, 42.7)],
    distance_km=231.4,
)


@pytest.fixture
def routing_client() -> AsyncMock:
    mock = AsyncMock()
    mock.fetch_road_route = AsyncMock(return_value=ROAD_ROUTE)
    return mock


@pytest_asyncio.fixture
async def client(routing_client: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    from src.api.app import create_app
    from src.api.dependencies import get_routing_client

    app = create_app()
    app.dependency_overrides[get_routing_client] = lambda: routing_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

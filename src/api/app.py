"""
FastAPI application factory.

* Registers routes for cities, route finding and admin.
* Opens / closes the road routing client via lifespan events.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from collections.abc import Sequence
from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, cities, routing
from src.config import settings
from src.data.cities import CITIES
from src.domain.entities import Location
from src.domain.planner import RoutePlanner
from src.infrastructure.routing_client import RoutingClient

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the routing client on startup; close it on shutdown."""
    app.state.routing_client = RoutingClient(
        settings.routing_service_url,
        timeout_seconds=settings.routing_timeout_seconds,
        profile=settings.routing_profile,
    )
    logger.info(
        "Route planner ready (%d cities, road routing %s)",
        len(app.state.planner.locations),
        "on" if settings.road_routing_enabled else "off",
    )
    yield
    await app.state.routing_client.aclose()


def create_app(locations: Optional[Sequence[Location]] = None) -> FastAPI:
    app = FastAPI(
        title="Geo Route Planner API",
        description=(
            "Finds routes between known cities with A* and iterative "
            "deepening DFS over a great-circle distance graph, and pairs "
            "A* results with road geometry from an external routing service."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.planner = RoutePlanner(CITIES if locations is None else locations)

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(cities.router, prefix="/api/v1")
    app.include_router(routing.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app

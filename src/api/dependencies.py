"""FastAPI dependency injection helpers."""

from fastapi import Request

from src.domain.planner import RoutePlanner
from src.infrastructure.routing_client import RoutingClient


def get_planner(request: Request) -> RoutePlanner:
    """Return the planner built over the app's city catalogue."""
    return request.app.state.planner


def get_routing_client(request: Request) -> RoutingClient:
    """Return the shared road routing client (opened in the lifespan)."""
    return request.app.state.routing_client

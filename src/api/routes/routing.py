"""
Route endpoints
===============

POST /api/v1/routes -- find a path between two known cities

A* results are paired with a road route from the external routing
service; the road distance becomes the displayed total when available.
IDDFS results always report the straight-line total.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.dependencies import get_planner, get_routing_client
from src.api.middleware import RATE_LIMIT, limiter
from src.api.schemas import ErrorResponse, RouteRequest, RouteResponse
from src.config import settings
from src.domain.entities import LocationNotFound, RoadRoute
from src.domain.enums import AlgorithmType
from src.domain.graph import estimated_travel_time, format_distance, format_time
from src.domain.planner import RoutePlanner
from src.infrastructure.routing_client import RoutingClient

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post(
    "",
    response_model=RouteResponse,
    summary="Find a route between two cities",
    responses={
        404: {"model": ErrorResponse, "description": "Start or goal is not a known city."}
    },
)
@limiter.limit(RATE_LIMIT)
async def find_route(
    request: Request,
    body: RouteRequest,
    planner: RoutePlanner = Depends(get_planner),
    routing: RoutingClient = Depends(get_routing_client),
):
    try:
        result = planner.find_path(body.start, body.goal, body.algorithm)
    except LocationNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    stops = [planner.get(name) for name in result.path]
    straight_line = planner.straight_line_distance(result.path)

    road = RoadRoute()
    if (
        result.algorithm is AlgorithmType.ASTAR
        and settings.road_routing_enabled
        and len(stops) >= 2
    ):
        road = await routing.fetch_road_route(stops)

    total = road.distance_km if road.available else straight_line
    hours = estimated_travel_time(total)

    return RouteResponse(
        algorithm=result.algorithm,
        found=result.found,
        path=result.path,
        coordinates=[(s.lat, s.lng) for s in stops],
        nodes_explored=result.nodes_explored,
        distance_km=result.distance,
        straight_line_distance_km=straight_line,
        road_distance_km=road.distance_km,
        road_geometry=road.geometry,
        total_distance_km=total,
        estimated_time_hours=hours,
        formatted_distance=format_distance(total),
        formatted_time=format_time(hours),
    )

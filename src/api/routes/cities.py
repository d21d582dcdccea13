"""
City endpoints
==============

GET /api/v1/cities            -- full catalogue
GET /api/v1/cities?q=tbi      -- name search (case-insensitive substring)
GET /api/v1/cities?region=X   -- cities in one region
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_planner
from src.api.middleware import RATE_LIMIT, limiter
from src.api.schemas import CityResponse
from src.data.cities import cities_in_region, search_cities
from src.domain.planner import RoutePlanner

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get(
    "",
    response_model=list[CityResponse],
    summary="List known cities",
)
@limiter.limit(RATE_LIMIT)
async def list_cities(
    request: Request,
    q: Optional[str] = None,
    region: Optional[str] = None,
    planner: RoutePlanner = Depends(get_planner),
):
    cities = list(planner.locations)
    if q is not None:
        cities = search_cities(q, cities)
    if region is not None:
        cities = cities_in_region(region, cities)
    return [CityResponse.model_validate(c) for c in cities]

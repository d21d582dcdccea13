"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from src.domain.enums import AlgorithmType


# ── Requests ──────────────────────────────────────────────────────────


class RouteRequest(BaseModel):
    start: str = Field(..., min_length=1, max_length=120)
    goal: str = Field(..., min_length=1, max_length=120)
    algorithm: AlgorithmType = AlgorithmType.ASTAR


# ── Responses ─────────────────────────────────────────────────────────


class CityResponse(BaseModel):
    name: str
    lat: float
    lng: float
    region: Optional[str] = None

    model_config = {"from_attributes": True}


class RouteResponse(BaseModel):
    algorithm: AlgorithmType
    found: bool
    path: list[str]
    coordinates: list[tuple[float, float]] = []
    nodes_explored: int
    distance_km: float = Field(
        ..., description="Cost reported by the search engine (graph km)."
    )
    straight_line_distance_km: float
    road_distance_km: float = 0.0
    road_geometry: list[tuple[float, float]] = []
    total_distance_km: float
    estimated_time_hours: float
    formatted_distance: str
    formatted_time: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str

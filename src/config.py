"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # External road routing (OSRM-compatible)
    routing_service_url: str = "https://router.project-osrm.org"
    routing_profile: str = "driving"
    routing_timeout_seconds: float = 10.0
    road_routing_enabled: bool = True  # A* results only

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

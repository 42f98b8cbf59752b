"""Runtime settings for the LAD registry engine.

Values come from the process environment (a ``.env`` file at the project
root is loaded first).  Durations are in seconds, elevations in meters.
"""

from __future__ import annotations

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

OPEN_ELEVATION_URL = "https://api.open-elevation.com/api/v1/lookup"
GOOGLE_ELEVATION_URL = "https://maps.googleapis.com/maps/api/elevation/json"


class Settings(BaseSettings):
    """Engine configuration, one field per environment variable."""

    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    debounce_seconds: float = Field(default=1.0, ge=0.0)
    open_elevation_url: str = OPEN_ELEVATION_URL
    google_elevation_url: str = GOOGLE_ELEVATION_URL
    google_elevation_api_key: str | None = None
    elevation_timeout_seconds: float = Field(default=10.0, gt=0.0)
    elevation_fallback_m: int = 25
    session_wait_timeout_seconds: float = Field(default=5.0, gt=0.0)
    cors_origins: str = "http://localhost:5173"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

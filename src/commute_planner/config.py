"""
Application settings.

Values come from environment variables prefixed ``COMMUTE_PLANNER_`` (or a
local ``.env`` file). Only the CLI, the flows and ``create_backend`` read
settings; backends receive their credentials as constructor arguments.

Example::

    COMMUTE_PLANNER_BACKEND=mapbox
    COMMUTE_PLANNER_MAPBOX_ACCESS_TOKEN=pk.xxxx
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for commute-planner."""

    model_config = SettingsConfigDict(
        env_prefix="COMMUTE_PLANNER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "commute-planner"
    app_env: str = "development"
    debug: bool = False

    # Which backend implementation create_backend() builds
    backend: Literal["osrm", "mapbox"] = "osrm"
    mapbox_access_token: SecretStr | None = None
    osrm_url: str = "https://router.project-osrm.org"
    nominatim_url: str = "https://nominatim.openstreetmap.org"

    country_scope: str = Field(default="gb", min_length=2, max_length=2)
    http_timeout: float = Field(default=15.0, gt=0)
    http_retries: int = Field(default=0, ge=0)
    max_concurrency: int | None = Field(default=None, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()

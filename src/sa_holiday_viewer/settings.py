"""
sa_holiday_viewer.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SAH_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "sa-holiday-viewer"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth (collaborator calls carry an internal_system token)
    jwt_alg: str = "HS256"
    jwt_issuer: str = "sa-holiday-viewer"
    jwt_audience: str = "sa-holiday-internal"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Persistence (search attempt audit trail)
    database_url: str = "sqlite+aiosqlite:///./sa_holiday_viewer.db"

    # Collaborators. None means the emulated /internal/v1 systems are called in-process.
    collaborator_base_url: str | None = None
    collaborator_timeout_seconds: float = Field(default=10.0, gt=0)

    # Emulated holiday system
    holiday_country: str = Field(default="ZA", min_length=2, max_length=3)

    # Viewer sessions kept in memory; the oldest is disposed on overflow.
    max_viewers: int = Field(default=1000, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every env var is prefixed with SAH_, e.g. SAH_COLLABORATOR_BASE_URL.

"""
booking_platform.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Render per-module database URLs from a single template.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_ENVIRONMENT = "test"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BOOKING_", case_sensitive=False)

    # `test` suppresses startup migrations and seeding for every module.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "booking-platform"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Bearer tokens identify the acting user for audit stamping.
    jwt_alg: str = "HS256"
    jwt_issuer: str = "booking-identity"
    jwt_audience: str = "booking-platform"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Each module owns a dedicated database; `{module}` is replaced by the module name.
    database_url: str = Field(default="sqlite+aiosqlite:///./{module}.db", repr=False)

    # Upper bound for a single migrate/seed step. None waits forever.
    startup_step_timeout_seconds: float | None = 120.0

    @field_validator("env", mode="before")
    @classmethod
    def _normalize_env(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    def module_database_url(self, module: str) -> str:
        return self.database_url.replace("{module}", module)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# A template without `{module}` points every module at one database; Alembic version
# tables are per module so histories stay separate in that layout too.

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, List

from pydantic import BaseModel, Field, field_validator


PRODUCTION_ENV = "production"
DEFAULT_PORT = 3000
LOG_LEVEL_NAMES = frozenset(
    {"CRITICAL", "FATAL", "ERROR", "WARN", "WARNING", "INFO", "DEBUG", "NOTSET"}
)


class Settings(BaseModel):
    """Runtime configuration resolved from environment variables."""

    port: int = Field(
        default=DEFAULT_PORT, alias="PORT", description="TCP port the HTTP server listens on."
    )
    host: str = Field(
        default="0.0.0.0", alias="HOST", description="Interface the HTTP server binds to."
    )
    app_env: str = Field(
        default="development",
        alias="APP_ENV",
        description="Deployment environment name. 'production' skips local .env loading.",
    )
    log_level: str = Field(
        default="INFO", alias="LOG_LEVEL", description="Root logging level."
    )
    cors_allow_origins: str = Field(
        default="*",
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of origins allowed to call the API ('*' for any).",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("port", mode="before")
    @classmethod
    def _default_blank_port(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PORT
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = (value or "INFO").strip().upper()
        if level not in LOG_LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == PRODUCTION_ENV

    @property
    def allowed_origins(self) -> List[str]:
        origins = [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]
        return origins or ["*"]

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(dict(os.environ))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from environment variables."""
    return Settings.from_env()

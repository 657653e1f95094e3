"""Configuration management for the relationship tracking service."""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class Settings(BaseModel):
    """Application configuration loaded from environment variables."""

    app_env: str = "dev"
    database_url: str = "sqlite:///./rapport.db"
    cors_origins: list[str] = Field(default_factory=list)
    version: str = "0.1.0"
    auth_jwt_secret: str = ""
    auth_jwt_algorithms: list[str] = Field(default_factory=lambda: ["HS256"])
    auth_jwt_audience: str = "authenticated"
    follow_up_feed_limit: int = Field(default=5, ge=1)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            if not value:
                return []
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        if isinstance(value, list):
            return value
        return []

    @field_validator("auth_jwt_algorithms", mode="before")
    @classmethod
    def assemble_jwt_algorithms(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            algorithms = [item for item in value.replace(",", " ").split() if item]
            return algorithms or ["HS256"]
        if isinstance(value, list):
            return value
        return ["HS256"]

    @property
    def async_database_url(self) -> str:
        if self.database_url.startswith("sqlite+aiosqlite://"):
            return self.database_url
        if self.database_url.startswith("sqlite:///"):
            return self.database_url.replace("sqlite:///", "sqlite+aiosqlite:///")
        if self.database_url.startswith("sqlite://"):
            return self.database_url.replace("sqlite://", "sqlite+aiosqlite://")
        return self.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")


def _build_settings() -> Settings:
    raw_values: dict[str, Any] = {
        "app_env": os.getenv("APP_ENV"),
        "database_url": os.getenv("DATABASE_URL"),
        "cors_origins": os.getenv("CORS_ORIGINS"),
        "version": os.getenv("APP_VERSION"),
        "auth_jwt_secret": os.getenv("AUTH_JWT_SECRET"),
        "auth_jwt_algorithms": os.getenv("AUTH_JWT_ALGORITHMS"),
        "auth_jwt_audience": os.getenv("AUTH_JWT_AUDIENCE"),
        "follow_up_feed_limit": os.getenv("FOLLOW_UP_FEED_LIMIT"),
    }
    filtered_values = {key: value for key, value in raw_values.items() if value is not None}
    return Settings(**filtered_values)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return _build_settings()

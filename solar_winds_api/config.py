# solar_winds_api/config.py

"""
Configuration for the Solar Winds HTTP API.

Settings are read from environment variables (and an optional ``.env``
file) through pydantic-settings. The most relevant keys:

- DATABASE_URL
    SQLAlchemy URL of the relational store.
    Default: "sqlite:///./solar_winds.db"

- PORT / HOST
    Where ``solar-winds-api`` binds uvicorn.
    Default: 0.0.0.0:3000

- API_PREFIX
    Optional prefix for every resource router (e.g. "/api").
    Default: "" (no prefix)

- FRONTEND_URL / ALLOWED_ORIGINS
    CORS origins. ALLOWED_ORIGINS is a comma-separated list and falls back
    to FRONTEND_URL when unset. "*" allows all origins.

- AUTO_CREATE_SCHEMA
    Create missing tables when the application starts.
    Default: true

- LOG_LEVEL / LOG_FORMAT
    Level name and renderer ("json" or "console").

Typical usage
=============

    from solar_winds_api.config import get_settings

    settings = get_settings()
    engine = create_engine(settings.DATABASE_URL)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration registry, validated by pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "solar-winds-api"
    APP_VERSION: str = "1.0.0"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # --- HTTP ---
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_PREFIX: str = ""

    # --- CORS ---
    FRONTEND_URL: str = "http://localhost:5173"
    ALLOWED_ORIGINS: Optional[str] = None

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./solar_winds.db"
    SQL_ECHO: bool = False
    AUTO_CREATE_SCHEMA: bool = True

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        """
        Parsed list of allowed CORS origins.
        """
        raw = (self.ALLOWED_ORIGINS or "").strip()
        if not raw:
            return [self.FRONTEND_URL]
        if raw == "*":
            return ["*"]
        parts = [p.strip() for p in raw.split(",")]
        return [p for p in parts if p] or [self.FRONTEND_URL]

    @property
    def api_root(self) -> str:
        """
        Normalized router prefix: "" or "/something" without trailing slash.
        """
        prefix = self.API_PREFIX.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = "/" + prefix
        return prefix


# Singleton settings instance
_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the global Settings instance, creating it from the environment
    on first use.
    """
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def set_settings(settings: Optional[Settings]) -> None:
    """
    Replace the global Settings instance.

    Mainly useful for tests, where configuration is overridden without
    touching environment variables. Passing ``None`` forces a reload from
    the environment on the next ``get_settings()`` call.
    """
    global _SETTINGS
    _SETTINGS = settings


__all__ = ["AppEnv", "Settings", "get_settings", "set_settings"]

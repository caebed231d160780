"""core/config.py — Application configuration via Pydantic BaseSettings.

Loads environment variables from .env (and the OS environment).
Import `settings` from this module wherever configuration is needed.

Usage:
    from core.config import settings

    db_url = settings.database_url
    if settings.catalog_filter_mode == FilterMode.COMPOSE:
        ...
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.filtering import FilterMode

# .env lives in the project root (one level above backend/)
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./museum_events.db"

    # Application
    environment: str = "development"
    log_level: str = "DEBUG"
    log_dir: str = str(_PROJECT_ROOT / "logs")

    # CORS — list of allowed origins for the browser frontend
    allowed_origins: list[str] = [
        "http://localhost:5173",   # Vite dev server
        "http://localhost:3000",   # CRA fallback
    ]

    # Event catalog
    events_source_url: str = ""          # empty → bundled static/data/events.json
    events_fetch_timeout: float = 5.0    # seconds before load() falls back
    catalog_filter_mode: FilterMode = FilterMode.REPLACE
    event_categories: list[str] = ["exhibition", "workshop", "festival"]

    # Signup
    session_cookie_name: str = "museum_session"
    registration_url: str = "/static/registration.html"
    signup_success_url: str = "/static/success.html"

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("catalog_filter_mode", mode="before")
    @classmethod
    def _lowercase_filter_mode(cls, v):
        return v.lower() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


# Singleton — import this everywhere
settings = Settings()

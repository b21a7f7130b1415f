"""Runtime configuration sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from dotenv import load_dotenv


DEFAULT_DATABASE_URL = "sqlite:///./data/portfolio.db"
DEFAULT_CORS_ORIGINS = ("http://localhost:5000", "http://localhost:5173")


@dataclass(frozen=True)
class Settings:
    database_url: str
    app_env: str
    log_level: str
    auto_migrate: bool
    cors_origins: Tuple[str, ...]
    session_cookie_name: str
    session_max_age_hours: int
    public_cache_ttl_seconds: float
    upload_dir: str
    upload_max_bytes: int

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_hours * 3600


def _normalize_bool(value: str | None, default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _list_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return tuple(entry.strip() for entry in raw.split(",") if entry.strip())


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings; `.env` is honoured when present."""
    load_dotenv(override=False)
    app_env = os.getenv("APP_ENV", "development").strip().lower() or "development"
    return Settings(
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        app_env=app_env,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        auto_migrate=_normalize_bool(os.getenv("AUTO_MIGRATE"), default=True),
        cors_origins=_list_env("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        session_cookie_name=os.getenv("SESSION_COOKIE_NAME", "portfolio_session"),
        session_max_age_hours=_int_env("SESSION_MAX_AGE_HOURS", 24 * 30),
        public_cache_ttl_seconds=_float_env("PUBLIC_CACHE_TTL_SECONDS", 30.0),
        upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
        upload_max_bytes=_int_env("UPLOAD_MAX_BYTES", 5 * 1024 * 1024),
    )


def refresh_settings() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()

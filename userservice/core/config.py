"""
Configuration helpers for the user service.

Settings are read once from environment variables so that the persistence
driver, the console and the HTTP app never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    log_json: bool
    sql_echo: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_json=_bool(os.getenv("LOG_JSON"), False),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
    )

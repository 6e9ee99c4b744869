"""
Process settings read from environment variables.

Built once at startup (see `main.py`) and passed down explicitly; nothing
below reads `os.environ` on the request path.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq's sslmode in the DSN query string.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def cors_allow_origins() -> tuple[str, ...]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str
    pool_min_size: int = 1
    pool_max_size: int = 5
    command_timeout: float = 30.0
    acquire_timeout: float = 10.0
    create_schema: bool = True
    app_host: str = "127.0.0.1"
    app_port: int = 8000
    log_level: str = "INFO"
    cors_allow_origins: tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> Settings:
        pool_max_size = max(1, _env_int("DB_POOL_MAX_SIZE", 5))
        pool_min_size = min(max(0, _env_int("DB_POOL_MIN_SIZE", 1)), pool_max_size)
        return cls(
            database_url=database_url(),
            pool_min_size=pool_min_size,
            pool_max_size=pool_max_size,
            command_timeout=_env_float("DB_COMMAND_TIMEOUT", 30.0),
            acquire_timeout=_env_float("DB_ACQUIRE_TIMEOUT", 10.0),
            create_schema=_env_bool("DB_CREATE_SCHEMA", True),
            app_host=_env_str("APP_HOST", "127.0.0.1"),
            app_port=_env_int("APP_PORT", 8000),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            cors_allow_origins=cors_allow_origins(),
        )

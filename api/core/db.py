"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. It is created in the FastAPI lifespan
(see `api/main.py`), handed to the DAOs, and closed on shutdown.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any
from uuid import UUID

import asyncpg

from .config import Settings
from .errors import InvalidUUID

logger = logging.getLogger(__name__)

# Exceptions the DAOs translate into `OtherDBError`.
STORE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


_HYPHENATED = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

# Accepted forms: hyphenated, 32-hex simple, braced "{hyphenated}", "urn:uuid:hyphenated".
# The shape is checked first; uuid.UUID ignores stray hyphens and prefixes.
_UUID_SHAPE = re.compile(
    "(?:" + _HYPHENATED + "|[0-9a-fA-F]{32}|\\{" + _HYPHENATED + "\\}|urn:uuid:" + _HYPHENATED + ")"
)


def parse_uuid(value: str) -> UUID:
    if not isinstance(value, str) or _UUID_SHAPE.fullmatch(value) is None:
        raise InvalidUUID(f"Invalid UUID: {value!r}")
    return UUID(value)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool, *, acquire_timeout: float | None = None) -> None:
        self._pool = pool
        self._acquire_timeout = acquire_timeout

    @classmethod
    async def connect(cls, settings: Settings) -> Database:
        pool = await asyncpg.create_pool(
            dsn=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            command_timeout=settings.command_timeout,
        )
        logger.info(
            "db_pool_created min_size=%s max_size=%s",
            settings.pool_min_size,
            settings.pool_max_size,
        )
        return cls(pool, acquire_timeout=settings.acquire_timeout)

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        async with self._pool.acquire(timeout=self._acquire_timeout) as conn:
            row = await conn.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self._pool.acquire(timeout=self._acquire_timeout) as conn:
            rows = await conn.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the command tag,
        e.g. "DELETE 0".
        """
        async with self._pool.acquire(timeout=self._acquire_timeout) as conn:
            return await conn.execute(sql, *args)

"""
Async database access helpers (raw SQL) using asyncpg.

One `Database` handle exists per logical database (ojakh, nvag). The app
creates both on startup, parks them on `app.state`, and closes them on
shutdown (see `api/main.py`). Routes get them through `core.dependencies`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

logger = logging.getLogger(__name__)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    A named asyncpg pool with the small query surface the repositories use.
    """

    def __init__(self, name: str, env_var: str, *, fallback_env_var: str | None = None) -> None:
        self.name = name
        self.env_var = env_var
        self.fallback_env_var = fallback_env_var
        self._pool: asyncpg.Pool | None = None

    def database_url(self) -> str:
        url = os.environ.get(self.env_var, "").strip()
        if not url and self.fallback_env_var:
            url = os.environ.get(self.fallback_env_var, "").strip()
        if not url:
            raise RuntimeError(f"{self.env_var} is not set.")
        return _sanitize_database_url(url)

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(
            dsn=self.database_url(),
            min_size=1,
            max_size=5,
            command_timeout=30,
        )
        logger.info("db_pool_open name=%s", self.name)

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_pool_closed name=%s", self.name)

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError(f"DB pool '{self.name}' is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self.pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self.pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the status tag, e.g. "DELETE 1".
        """
        return await self.pool.execute(sql, *args)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[asyncpg.Connection]:
        """
        Borrow one connection for the duration of a transaction.

        Commits on normal exit, rolls back when the block raises. The connection
        goes back to the pool on every path.
        """
        async with self.pool.acquire() as conn:  # type: asyncpg.Connection
            async with conn.transaction():
                yield conn


def rows_affected(status: str) -> int:
    """
    Parse the row count out of an asyncpg status tag ("DELETE 3" -> 3).
    """
    try:
        return int((status or "").rsplit(" ", 1)[-1])
    except ValueError:
        return 0

"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns one connection pool. The application opens it in its lifespan
handler, keeps it on `app.state.db` and closes it on shutdown (see
`api/main.py`). Request handlers receive it through `get_database`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import Request


# Storage failures are explicit and separable from other runtime errors.
class DatabaseError(RuntimeError):
    pass


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _affected_rows(status: str) -> int:
    """
    Parse the row count from an asyncpg command tag ("DELETE 1", "UPDATE 0").
    """
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(cls, dsn: str, *, min_size: int = 1, max_size: int = 5) -> "Database":
        try:
            pool = await asyncpg.create_pool(dsn=dsn, min_size=min_size, max_size=max_size)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
            raise DatabaseError("Failed to open the database pool.") from exc
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self._pool.fetchrow(sql, *args)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
            raise DatabaseError(str(exc)) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self._pool.fetch(sql, *args)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
            raise DatabaseError(str(exc)) from exc
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return the affected row count.
        """
        try:
            status = await self._pool.execute(sql, *args)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
            raise DatabaseError(str(exc)) from exc
        return _affected_rows(status)


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database is not initialized. It is opened in the app lifespan.")
    return database

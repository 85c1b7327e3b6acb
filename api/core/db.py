"""
Async MySQL access helpers (raw SQL) using aiomysql.

Every call opens its own connection, runs exactly one statement and closes
the connection again. Nothing is pooled or shared between requests.

SQL parameter style:
- aiomysql/PyMySQL use positional `%s` placeholders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Sequence

import aiomysql
from pymysql.constants import CLIENT

from .config import Settings
from .errors import InternalError

logger = logging.getLogger(__name__)

_DRIVER_ERRORS = (aiomysql.Error, OSError)


@dataclass(frozen=True)
class ExecResult:
    affected_rows: int
    insert_id: int | None = None


def _params(params: Sequence[Any] | None) -> tuple[Any, ...] | None:
    # PyMySQL only %-formats the statement when args is not None, which keeps
    # literal `%` in parameterless raw SQL intact.
    if not params:
        return None
    return tuple(params)


def _exec_result(cursor: Any) -> ExecResult:
    insert_id = cursor.lastrowid or None
    return ExecResult(affected_rows=max(int(cursor.rowcount or 0), 0), insert_id=insert_id)


class QueryExecutor:
    """
    One statement per connection, one connection per call.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def _connect(self) -> Any:
        s = self._settings
        return await aiomysql.connect(
            host=s.db_host,
            port=s.db_port,
            user=s.db_user,
            password=s.db_password,
            db=s.db_name,
            autocommit=True,
            connect_timeout=s.db_connect_timeout,
            cursorclass=aiomysql.DictCursor,
            # UPDATE reports matched rows, so rewriting a row with its own
            # values still counts as found.
            client_flag=CLIENT.FOUND_ROWS,
        )

    @staticmethod
    def _release(conn: Any) -> None:
        try:
            conn.close()
        except Exception:
            # Never let a close failure replace the statement's own outcome.
            logger.warning("connection_close_failed", exc_info=True)

    async def _run(
        self,
        sql: str,
        params: Sequence[Any] | None,
        handler: Callable[[Any], Awaitable[Any]],
    ) -> Any:
        try:
            conn = await self._connect()
        except _DRIVER_ERRORS as exc:
            logger.error(
                "connect_failed host=%s port=%s db=%s error=%s",
                self._settings.db_host,
                self._settings.db_port,
                self._settings.db_name,
                exc,
            )
            raise InternalError(str(exc)) from exc

        try:
            async with conn.cursor() as cursor:
                logger.debug("query sql=%s params=%s", sql, params)
                await cursor.execute(sql, _params(params))
                return await handler(cursor)
        except _DRIVER_ERRORS as exc:
            logger.error("query_failed sql=%s error=%s", sql, exc)
            raise InternalError(str(exc)) from exc
        finally:
            self._release(conn)

    async def fetch_all(self, sql: str, params: Sequence[Any] | None = None) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """

        async def _rows(cursor: Any) -> list[dict[str, Any]]:
            rows = await cursor.fetchall()
            return [dict(r) for r in rows or []]

        return await self._run(sql, params, _rows)

    async def fetch_one(self, sql: str, params: Sequence[Any] | None = None) -> dict[str, Any] | None:
        rows = await self.fetch_all(sql, params)
        return rows[0] if rows else None

    async def execute(self, sql: str, params: Sequence[Any] | None = None) -> ExecResult:
        """
        Run a statement (INSERT/UPDATE/DELETE). Returns affected rows and insert id.
        """

        async def _status(cursor: Any) -> ExecResult:
            return _exec_result(cursor)

        return await self._run(sql, params, _status)

    async def run(self, sql: str, params: Sequence[Any] | None = None) -> list[dict[str, Any]] | ExecResult:
        """
        Run any single statement: rows when it produced a result set, else status.
        """

        async def _either(cursor: Any) -> list[dict[str, Any]] | ExecResult:
            if cursor.description:
                rows = await cursor.fetchall()
                return [dict(r) for r in rows or []]
            return _exec_result(cursor)

        return await self._run(sql, params, _either)

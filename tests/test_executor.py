from typing import Any

import aiomysql
import pytest

from core import db
from core.config import Settings
from core.db import ExecResult, QueryExecutor
from core.errors import InternalError


class FakeCursor:
    def __init__(self, rows=None, description=None, rowcount=0, lastrowid=None, error=None):
        self.rows = rows or []
        self.description = description
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self.error = error
        self.executed: list[tuple[str, Any]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def execute(self, sql, args=None):
        self.executed.append((sql, args))
        if self.error is not None:
            raise self.error

    async def fetchall(self):
        return self.rows


class FakeConnection:
    def __init__(self, cursor: FakeCursor, close_error: Exception | None = None):
        self._cursor = cursor
        self.close_error = close_error
        self.closed = False

    def cursor(self):
        return self._cursor

    def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def settings() -> Settings:
    return Settings(db_name="shop", secret_key="x", db_host="db.local", db_port=3307)


def _patch_connect(monkeypatch, conn: FakeConnection, seen: list[dict] | None = None):
    async def fake_connect(**kwargs):
        if seen is not None:
            seen.append(kwargs)
        return conn

    monkeypatch.setattr(db.aiomysql, "connect", fake_connect)


@pytest.mark.asyncio
async def test_fetch_all_uses_fresh_connection_and_closes_it(monkeypatch, settings):
    cursor = FakeCursor(rows=[{"a": 1}], description=(("a",),))
    conn = FakeConnection(cursor)
    seen: list[dict] = []
    _patch_connect(monkeypatch, conn, seen)

    rows = await QueryExecutor(settings).fetch_all("SELECT a FROM t WHERE b = %s", ["x"])

    assert rows == [{"a": 1}]
    assert cursor.executed == [("SELECT a FROM t WHERE b = %s", ("x",))]
    assert conn.closed is True
    assert seen[0]["host"] == "db.local"
    assert seen[0]["port"] == 3307
    assert seen[0]["db"] == "shop"
    assert seen[0]["autocommit"] is True


@pytest.mark.asyncio
async def test_parameterless_statement_passes_no_args(monkeypatch, settings):
    cursor = FakeCursor()
    _patch_connect(monkeypatch, FakeConnection(cursor))
    await QueryExecutor(settings).fetch_all("SELECT '100%'")
    assert cursor.executed == [("SELECT '100%'", None)]


@pytest.mark.asyncio
async def test_execute_reports_status(monkeypatch, settings):
    cursor = FakeCursor(rowcount=1, lastrowid=15)
    _patch_connect(monkeypatch, FakeConnection(cursor))
    result = await QueryExecutor(settings).execute("INSERT INTO t (a) VALUES (%s)", [1])
    assert result == ExecResult(affected_rows=1, insert_id=15)


@pytest.mark.asyncio
async def test_run_returns_rows_or_status(monkeypatch, settings):
    _patch_connect(monkeypatch, FakeConnection(FakeCursor(rows=[{"n": 1}], description=(("n",),))))
    assert await QueryExecutor(settings).run("SELECT 1 AS n") == [{"n": 1}]

    _patch_connect(monkeypatch, FakeConnection(FakeCursor(rowcount=2)))
    assert await QueryExecutor(settings).run("UPDATE t SET a = 1") == ExecResult(affected_rows=2)


@pytest.mark.asyncio
async def test_statement_error_closes_connection(monkeypatch, settings):
    conn = FakeConnection(FakeCursor(error=aiomysql.ProgrammingError(1064, "syntax error")))
    _patch_connect(monkeypatch, conn)

    with pytest.raises(InternalError) as excinfo:
        await QueryExecutor(settings).fetch_all("SELEC 1")

    assert "syntax error" in str(excinfo.value.detail)
    assert conn.closed is True


@pytest.mark.asyncio
async def test_close_failure_does_not_mask_statement_error(monkeypatch, settings):
    conn = FakeConnection(
        FakeCursor(error=aiomysql.OperationalError(1146, "Table 'shop.t' doesn't exist")),
        close_error=RuntimeError("close failed"),
    )
    _patch_connect(monkeypatch, conn)

    with pytest.raises(InternalError) as excinfo:
        await QueryExecutor(settings).fetch_all("SELECT * FROM t")

    assert "doesn't exist" in str(excinfo.value.detail)


@pytest.mark.asyncio
async def test_close_failure_does_not_mask_success(monkeypatch, settings):
    conn = FakeConnection(FakeCursor(rows=[{"a": 1}], description=(("a",),)), close_error=RuntimeError("boom"))
    _patch_connect(monkeypatch, conn)
    assert await QueryExecutor(settings).fetch_one("SELECT a FROM t") == {"a": 1}


@pytest.mark.asyncio
async def test_connect_failure_is_internal_error(monkeypatch, settings):
    async def refuse(**kwargs):
        raise aiomysql.OperationalError(2003, "Can't connect to MySQL server")

    monkeypatch.setattr(db.aiomysql, "connect", refuse)

    with pytest.raises(InternalError):
        await QueryExecutor(settings).fetch_all("SELECT 1")

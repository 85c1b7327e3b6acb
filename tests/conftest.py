from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.config import Settings
from core.db import ExecResult
from core.deps import get_executor
from main import create_app

SECRET = "test-secret"


class FakeExecutor:
    """
    Stands in for QueryExecutor: records every statement and answers from a
    queue of canned results (one entry per call, in call order).
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, list[Any]]] = []
        self.results: list[Any] = []

    def queue(self, *results: Any) -> None:
        self.results.extend(results)

    def _answer(self, kind: str, sql: str, params: Any, default: Any) -> Any:
        self.calls.append((kind, sql, list(params or [])))
        result = self.results.pop(0) if self.results else default
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_all(self, sql: str, params: Any = None) -> list[dict]:
        return self._answer("fetch_all", sql, params, [])

    async def fetch_one(self, sql: str, params: Any = None) -> dict | None:
        return self._answer("fetch_one", sql, params, None)

    async def execute(self, sql: str, params: Any = None) -> ExecResult:
        return self._answer("execute", sql, params, ExecResult(affected_rows=1))

    async def run(self, sql: str, params: Any = None) -> Any:
        return self._answer("run", sql, params, [])


def with_secret(secret: str | None = SECRET, **body: Any) -> dict:
    """
    Request body carrying the shared secret the way the platform sends it.
    """
    context: dict[str, Any] = dict(body.pop("requestContext", {}) or {})
    if secret is not None:
        context["settings"] = {"secretKey": secret}
    return {"requestContext": context, **body}


@pytest.fixture
def settings() -> Settings:
    return Settings(db_name="shop", secret_key=SECRET)


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def app(settings: Settings, executor: FakeExecutor):
    app = create_app(settings)
    app.dependency_overrides[get_executor] = lambda: executor
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

"""
Collection item persistence (raw SQL built by `data.builder`).
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from core.db import ExecResult, QueryExecutor

from . import builder


async def find_items(
    executor: QueryExecutor,
    collection: str,
    *,
    filter_: Mapping[str, Any] | None = None,
    sort: Sequence[Mapping[str, Any]] | None = None,
    skip: Any = None,
    limit: Any = None,
) -> list[dict]:
    sql, params = builder.find(collection, filter_, sort, skip, limit)
    return await executor.fetch_all(sql, params)


async def count_items(
    executor: QueryExecutor,
    collection: str,
    *,
    filter_: Mapping[str, Any] | None = None,
) -> int:
    sql, params = builder.count(collection, filter_)
    row = await executor.fetch_one(sql, params)
    if row is None:
        return 0
    return int(row.get("totalCount") or 0)


async def get_item(executor: QueryExecutor, collection: str, item_id: Any) -> dict | None:
    sql, params = builder.get(collection, item_id)
    return await executor.fetch_one(sql, params)


async def insert_item(executor: QueryExecutor, collection: str, item: Mapping[str, Any]) -> ExecResult:
    sql, params = builder.insert(collection, item)
    return await executor.execute(sql, params)


async def update_item(executor: QueryExecutor, collection: str, item: Mapping[str, Any]) -> ExecResult:
    sql, params = builder.update(collection, item)
    return await executor.execute(sql, params)


async def remove_item(executor: QueryExecutor, collection: str, item_id: Any) -> ExecResult:
    sql, params = builder.remove(collection, item_id)
    return await executor.execute(sql, params)

"""
Simple item lookups: flat filtered find and point lookup by `_id`.
"""

from __future__ import annotations

from typing import Any

from core.db import QueryExecutor
from core.errors import NotFoundError
from data import repository
from data.service import format_item

from . import schemas


def _page(limit: Any, offset: Any) -> tuple[Any, Any]:
    # A bare limit reads from the first row; a bare offset is ignored.
    if isinstance(limit, int) and not isinstance(limit, bool) and offset is None:
        return 0, limit
    return offset, limit


async def find_items(executor: QueryExecutor, request: schemas.FindItemsRequest) -> dict:
    skip, limit = _page(request.limit, request.offset)
    rows = await repository.find_items(
        executor,
        request.table,
        filter_=request.filter,
        skip=skip,
        limit=limit,
    )
    return {"items": [format_item(row) for row in rows]}


async def get_item(executor: QueryExecutor, table: str, item_id: str) -> dict:
    row = await repository.get_item(executor, table, item_id)
    if row is None:
        raise NotFoundError("Item not found.")
    return {"item": format_item(row)}

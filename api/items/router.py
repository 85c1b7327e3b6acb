"""
Item lookup endpoints (`/api/items/*`).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core.db import QueryExecutor
from core.deps import get_executor
from core.payloads import parse_body

from . import schemas, service

router = APIRouter()


@router.post("/api/items/find")
async def find_items(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.find_items(executor, parse_body(schemas.FindItemsRequest, body))


@router.get("/api/items/{table}/{item_id}")
async def get_item(
    table: str,
    item_id: str,
    _: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.get_item(executor, table, item_id)

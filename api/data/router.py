"""
Structured CRUD endpoints (`/api/query/data/*`).
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


@router.post("/api/query/data/find")
async def find_items(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.find(executor, parse_body(schemas.FindRequest, body))


@router.post("/api/query/data/count")
async def count_items(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.count(executor, parse_body(schemas.CountRequest, body))


@router.post("/api/query/data/insert")
async def insert_item(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.insert(executor, parse_body(schemas.InsertRequest, body))


@router.post("/api/query/data/update")
async def update_item(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.update(executor, parse_body(schemas.UpdateRequest, body))


@router.post("/api/query/data/remove")
async def remove_item(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.remove(executor, parse_body(schemas.RemoveRequest, body))

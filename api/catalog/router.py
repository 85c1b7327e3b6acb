"""
Schema-discovery endpoints (`/api/query/schemas/*`).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core.config import Settings
from core.db import QueryExecutor
from core.deps import get_executor, get_settings
from core.payloads import parse_body

from . import schemas, service

router = APIRouter()


@router.post("/api/query/schemas/find")
async def find_schemas(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    request = parse_body(schemas.FindSchemasRequest, body)
    return await service.find_schemas(executor, request.schema_ids)


@router.post("/api/query/schemas/list")
async def list_schemas(
    _: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
    settings: Settings = Depends(get_settings),
) -> dict:
    return await service.list_schemas(executor, db_name=settings.db_name)

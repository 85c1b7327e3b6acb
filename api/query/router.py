"""
Raw SQL endpoints (`GET /api/query`, `POST /api/update`).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core.db import QueryExecutor
from core.deps import get_executor

from . import service

router = APIRouter()


@router.get("/api/query")
async def run_query(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    """
    Run a read statement sent in the body as `{"sql": "..."}`.
    """
    return await service.run_query(executor, body.get("sql"))


@router.post("/api/update")
async def run_update(
    body: dict[str, Any] = Depends(auth_dependencies.require_secret_key),
    executor: QueryExecutor = Depends(get_executor),
) -> dict:
    return await service.run_update(executor, body.get("sql"))

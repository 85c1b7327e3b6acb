"""
FastAPI dependencies for app-level objects stored on `app.state`.
"""

from __future__ import annotations

from fastapi import Request

from .config import Settings
from .db import QueryExecutor


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_executor(request: Request) -> QueryExecutor:
    return request.app.state.executor

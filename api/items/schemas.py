"""
Pydantic schemas for the simple item lookup endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class FindItemsRequest(BaseModel):
    table: str = Field(..., min_length=1)
    filter: dict[str, Any] | None = None
    limit: Any = None
    offset: Any = None

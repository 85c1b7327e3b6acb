"""
Pydantic schemas for schema-discovery endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FindSchemasRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_ids: list[str] = Field(..., alias="schemaIds", min_length=1)

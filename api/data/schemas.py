"""
Pydantic schemas for the structured data endpoints.

Field aliases are the platform's camelCase wire names.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CollectionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    collection_name: str = Field(..., alias="collectionName", min_length=1)


class FindRequest(CollectionRequest):
    filter: dict[str, Any] | None = None
    sort: list[dict[str, Any]] | None = None
    # Kept loose on purpose: pagination applies only when both are integers.
    skip: Any = None
    limit: Any = None
    return_total_count: bool = Field(default=False, alias="returnTotalCount")


class CountRequest(CollectionRequest):
    filter: dict[str, Any] | None = None


class InsertRequest(CollectionRequest):
    item: dict[str, Any] | None = None
    data: dict[str, Any] | None = None

    def payload(self) -> dict[str, Any] | None:
        # `item` wins over `data` when both are sent.
        return self.item or self.data


class UpdateRequest(CollectionRequest):
    item: dict[str, Any]


class RemoveRequest(CollectionRequest):
    item_id: str | int = Field(..., alias="itemId")

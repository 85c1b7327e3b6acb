"""
Structured CRUD business logic.

Scope:
- find / count with filter, sort and pagination
- insert / update / remove of single items keyed by `_id`
- platform encoding of returned rows (dates as `{"$date": iso}`, binary
  columns as base64 text)
"""

from __future__ import annotations

import base64
import logging
from datetime import date, datetime
from typing import Any

from core.db import QueryExecutor
from core.errors import NotFoundError, ValidationError

from . import repository, schemas

logger = logging.getLogger(__name__)


def _encode_value(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return {"$date": value.isoformat()}
    if isinstance(value, (bytes, bytearray)):
        # BINARY, BLOB and binary(16) UUID columns need not be valid UTF-8.
        return base64.b64encode(value).decode("ascii")
    return value


def format_item(row: dict[str, Any]) -> dict[str, Any]:
    return {key: _encode_value(value) for key, value in row.items()}


async def find(executor: QueryExecutor, request: schemas.FindRequest) -> dict:
    rows = await repository.find_items(
        executor,
        request.collection_name,
        filter_=request.filter,
        sort=request.sort,
        skip=request.skip,
        limit=request.limit,
    )
    response: dict[str, Any] = {"items": [format_item(row) for row in rows]}
    if request.return_total_count:
        response["totalCount"] = await repository.count_items(
            executor,
            request.collection_name,
            filter_=request.filter,
        )
    return response


async def count(executor: QueryExecutor, request: schemas.CountRequest) -> dict:
    total = await repository.count_items(executor, request.collection_name, filter_=request.filter)
    return {"totalCount": total}


async def insert(executor: QueryExecutor, request: schemas.InsertRequest) -> dict:
    item = request.payload()
    if not item:
        raise ValidationError("Item to insert must be a non-empty object.")

    result = await repository.insert_item(executor, request.collection_name, item)
    inserted_id = result.insert_id if result.insert_id is not None else item.get("_id")
    logger.info("item_inserted collection=%s id=%s", request.collection_name, inserted_id)
    return {
        "_id": str(inserted_id) if inserted_id is not None else None,
        "message": "Item inserted.",
    }


async def update(executor: QueryExecutor, request: schemas.UpdateRequest) -> dict:
    result = await repository.update_item(executor, request.collection_name, request.item)
    if result.affected_rows == 0:
        raise NotFoundError("Item not found.")
    return {"message": "Item updated.", "affectedRows": result.affected_rows}


async def remove(executor: QueryExecutor, request: schemas.RemoveRequest) -> dict:
    result = await repository.remove_item(executor, request.collection_name, request.item_id)
    if result.affected_rows == 0:
        raise NotFoundError("Item not found.")
    return {"message": "Item removed.", "affectedRows": result.affected_rows}

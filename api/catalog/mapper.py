"""
MySQL `DESCRIBE` rows -> platform collection schemas.

A `DESCRIBE` row looks like `{"Field": "age", "Type": "int(11)", "Null": "NO",
"Key": "", ...}`. Each becomes a field schema with a semantic type, the
required/unique flags and the query operators the platform may use on it.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

ID_FIELD = "_id"
OWNER_FIELD = "_owner"

TYPE_TEXT = "text"
TYPE_NUMBER = "number"
TYPE_DATETIME = "datetime"
TYPE_BOOLEAN = "boolean"
TYPE_ANY = "any"

COMPARISON_OPERATORS = ["eq", "lt", "gt", "hasSome", "and", "lte", "gte", "or", "not", "ne"]
TEXT_OPERATORS = COMPARISON_OPERATORS + ["startsWith", "endsWith"]

ALLOWED_OPERATIONS = ["get", "find", "count", "update", "insert", "remove"]
MAX_PAGE_SIZE = 50
TTL_SECONDS = 3600

UNIQUE_KEYS = {"PRI", "UNI"}


def map_column_type(native_type: str | None) -> str:
    """
    Classify a native MySQL column type by substring.

    Order matters: numeric, temporal and boolean checks run before the text
    check so `datetime`/`timestamp` are never taken for text. Only the type
    name is inspected, not its length or `enum(...)` member list.
    """
    t = (native_type or "").lower().split("(", 1)[0]
    if "int" in t:
        return TYPE_NUMBER
    if "date" in t or "time" in t:
        return TYPE_DATETIME
    if "float" in t or "double" in t or "decimal" in t:
        return TYPE_NUMBER
    if "bool" in t:
        return TYPE_BOOLEAN
    if "char" in t or "text" in t:
        return TYPE_TEXT
    return TYPE_ANY


def query_operators(field_type: str) -> list[str]:
    if field_type == TYPE_TEXT:
        return list(TEXT_OPERATORS)
    return list(COMPARISON_OPERATORS)


def map_field(column: Mapping[str, Any]) -> dict[str, Any]:
    name = str(column.get("Field") or "")
    field_type = map_column_type(column.get("Type"))
    return {
        "displayName": name,
        "type": field_type,
        "required": column.get("Null") == "NO",
        "unique": column.get("Key") in UNIQUE_KEYS,
        "queryOperators": query_operators(field_type),
    }


def system_fields() -> dict[str, dict[str, Any]]:
    return {
        name: {
            "displayName": name,
            "type": TYPE_TEXT,
            "queryOperators": list(TEXT_OPERATORS),
        }
        for name in (ID_FIELD, OWNER_FIELD)
    }


def map_fields(
    columns: Iterable[Mapping[str, Any]],
    *,
    with_system_fields: bool = False,
) -> dict[str, dict[str, Any]]:
    """
    Map every column; the primary-key column is exposed as `_id`.

    `with_system_fields` puts `_id` and `_owner` in front, the way
    `schemas/find` answers. A primary key then replaces that `_id` entry with
    the column's own description.
    """
    fields: dict[str, dict[str, Any]] = system_fields() if with_system_fields else {}
    for column in columns:
        field = map_field(column)
        if not field["displayName"]:
            continue
        key = ID_FIELD if column.get("Key") == "PRI" else field["displayName"]
        fields[key] = field
    return fields


def collection_schema(name: str, fields: dict[str, dict[str, Any]]) -> dict[str, Any]:
    return {
        "id": name,
        "displayName": name,
        "allowedOperations": list(ALLOWED_OPERATIONS),
        "maxPageSize": MAX_PAGE_SIZE,
        "ttl": TTL_SECONDS,
        "fields": fields,
    }

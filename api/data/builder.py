"""
Structured request -> parameterized SQL.

Every builder returns `(sql, params)`. Table and column names only reach the
SQL text through `escape_id`; values only travel in `params`.

Filters come in two shapes:
- flat mapping `{"name": "a", "age": 5}` -> equality conjunction
- one clause `{"operator": "$eq" | "$hasSome", "fieldName": ..., "value": ...}`
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from core.errors import ValidationError
from core.sql import PLACEHOLDER, escape_id, placeholders, sql_value

ID_FIELD = "_id"

OP_EQ = "$eq"
OP_HAS_SOME = "$hasSome"
SUPPORTED_OPERATORS = (OP_EQ, OP_HAS_SOME)

_ASCENDING = {"asc", "ascending"}

Statement = tuple[str, list[Any]]


def _is_clause(filter_: Mapping[str, Any]) -> bool:
    return "operator" in filter_


def _where_clause(filter_: Mapping[str, Any]) -> tuple[str, list[Any]]:
    operator = filter_.get("operator")
    field_name = filter_.get("fieldName")
    value = filter_.get("value")

    if operator not in SUPPORTED_OPERATORS:
        raise ValidationError(f"Invalid filter operator: {operator!r}.")
    if not field_name:
        raise ValidationError("Filter fieldName is required.")

    column = escape_id(field_name)
    if operator == OP_EQ:
        return f"{column} = {PLACEHOLDER}", [sql_value(value)]

    if not isinstance(value, list):
        raise ValidationError("Filter value must be an array for the $hasSome operator.")
    if not value:
        raise ValidationError("Filter value for the $hasSome operator must not be empty.")
    return f"{column} IN ({placeholders(len(value))})", [sql_value(v) for v in value]


def _where_equalities(filter_: Mapping[str, Any]) -> tuple[str, list[Any]]:
    conditions = [f"{escape_id(key)} = {PLACEHOLDER}" for key in filter_]
    return " AND ".join(conditions), [sql_value(v) for v in filter_.values()]


def build_where(filter_: Mapping[str, Any] | None) -> Statement:
    """
    Return `("WHERE ...", params)`, or `("", [])` for an empty filter.
    """
    if not filter_:
        return "", []
    if not isinstance(filter_, Mapping):
        raise ValidationError("Filter must be an object.")

    if _is_clause(filter_):
        condition, params = _where_clause(filter_)
    else:
        condition, params = _where_equalities(filter_)
    return f"WHERE {condition}", params


def sort_direction(raw: Any) -> str:
    # Anything that isn't recognisably ascending sorts descending.
    if isinstance(raw, str) and raw.strip().lower() in _ASCENDING:
        return "ASC"
    return "DESC"


def build_order_by(sort: Sequence[Mapping[str, Any]] | None) -> str:
    if not sort:
        return ""
    if not isinstance(sort, Sequence) or isinstance(sort, (str, bytes)):
        raise ValidationError("Sort must be an array.")

    terms = []
    for entry in sort:
        if not isinstance(entry, Mapping) or not entry.get("fieldName"):
            raise ValidationError("Each sort entry needs a fieldName.")
        raw_direction = entry.get("direction", entry.get("order"))
        terms.append(f"{escape_id(entry['fieldName'])} {sort_direction(raw_direction)}")
    return "ORDER BY " + ", ".join(terms)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_pagination(skip: Any, limit: Any) -> Statement:
    """
    LIMIT/OFFSET only when both skip and limit are integers.
    """
    if not (_is_int(skip) and _is_int(limit)):
        return "", []
    if skip < 0 or limit < 0:
        raise ValidationError("skip and limit must not be negative.")
    return f"LIMIT {PLACEHOLDER} OFFSET {PLACEHOLDER}", [limit, skip]


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def find(
    collection: str,
    filter_: Mapping[str, Any] | None = None,
    sort: Sequence[Mapping[str, Any]] | None = None,
    skip: Any = None,
    limit: Any = None,
) -> Statement:
    where, params = build_where(filter_)
    order_by = build_order_by(sort)
    page, page_params = build_pagination(skip, limit)
    sql = _join(f"SELECT * FROM {escape_id(collection)}", where, order_by, page)
    return sql, params + page_params


def count(collection: str, filter_: Mapping[str, Any] | None = None) -> Statement:
    where, params = build_where(filter_)
    return _join(f"SELECT COUNT(*) AS totalCount FROM {escape_id(collection)}", where), params


def get(collection: str, item_id: Any, id_field: str = ID_FIELD) -> Statement:
    sql = f"SELECT * FROM {escape_id(collection)} WHERE {escape_id(id_field)} = {PLACEHOLDER}"
    return sql, [item_id]


def insert(collection: str, item: Mapping[str, Any]) -> Statement:
    if not isinstance(item, Mapping) or not item:
        raise ValidationError("Item to insert must be a non-empty object.")

    # One pass, so columns, placeholders and values line up positionally.
    columns: list[str] = []
    values: list[Any] = []
    for key, value in item.items():
        columns.append(escape_id(key))
        values.append(sql_value(value))

    sql = (
        f"INSERT INTO {escape_id(collection)} ({', '.join(columns)}) "
        f"VALUES ({placeholders(len(values))})"
    )
    return sql, values


def update(collection: str, item: Mapping[str, Any], id_field: str = ID_FIELD) -> Statement:
    if not isinstance(item, Mapping) or item.get(id_field) in (None, ""):
        raise ValidationError(f"Item is invalid or {id_field} is missing.")

    assignments: list[str] = []
    values: list[Any] = []
    for key, value in item.items():
        if key == id_field:
            continue
        assignments.append(f"{escape_id(key)} = {PLACEHOLDER}")
        values.append(sql_value(value))

    if not assignments:
        raise ValidationError("No fields to update.")

    sql = (
        f"UPDATE {escape_id(collection)} SET {', '.join(assignments)} "
        f"WHERE {escape_id(id_field)} = {PLACEHOLDER}"
    )
    return sql, values + [item[id_field]]


def remove(collection: str, item_id: Any, id_field: str = ID_FIELD) -> Statement:
    if item_id in (None, ""):
        raise ValidationError("Item id is required.")
    sql = f"DELETE FROM {escape_id(collection)} WHERE {escape_id(id_field)} = {PLACEHOLDER}"
    return sql, [item_id]

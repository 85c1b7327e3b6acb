"""
SQL text helpers.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import ValidationError

PLACEHOLDER = "%s"


def escape_id(name: object) -> str:
    """
    Quote a MySQL identifier (table or column name) with backticks.

    Embedded backticks are doubled. Dots are kept inside the quoted name, so
    `db.table` is one identifier and cannot reach another schema.
    """
    if not isinstance(name, str) or not name:
        raise ValidationError("Identifier must be a non-empty string.")
    if "\x00" in name:
        raise ValidationError("Identifier contains a NUL byte.")
    return "`" + name.replace("`", "``") + "`"


def placeholders(count: int) -> str:
    return ", ".join([PLACEHOLDER] * count)


def sql_value(value: Any) -> Any:
    """
    Parameter value for a column write or comparison.

    Objects and arrays (image, reference and tag fields) are stored as JSON
    text; the driver cannot bind them directly.
    """
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return value

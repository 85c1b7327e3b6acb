"""
Raw SQL endpoints.

Statements are screened by a keyword denylist and then run as-is. The
denylist is a plain case-insensitive substring match: it also rejects
harmless statements whose identifiers contain a listed word (for example a
`deleted_at` column).
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import ExecResult, QueryExecutor
from core.errors import ValidationError
from data.service import format_item

logger = logging.getLogger(__name__)

FORBIDDEN_KEYWORDS = ("DROP", "DELETE", "ALTER", "TRUNCATE")


def validate_sql(sql: Any) -> str:
    if not isinstance(sql, str) or not sql.strip():
        raise ValidationError("Invalid SQL statement.")

    upper = sql.upper()
    for keyword in FORBIDDEN_KEYWORDS:
        if keyword in upper:
            logger.warning("raw_sql_rejected keyword=%s", keyword)
            raise ValidationError(f"Keyword '{keyword}' is not allowed.")
    return sql


async def run_query(executor: QueryExecutor, sql: Any) -> dict:
    statement = validate_sql(sql)
    result = await executor.run(statement)
    if isinstance(result, ExecResult):
        return {"rows": [], "affectedRows": result.affected_rows}
    return {"rows": [format_item(row) for row in result]}


async def run_update(executor: QueryExecutor, sql: Any) -> dict:
    statement = validate_sql(sql)
    result = await executor.run(statement)
    affected = result.affected_rows if isinstance(result, ExecResult) else 0
    logger.info("raw_sql_executed affected_rows=%s", affected)
    return {"message": "Statement executed.", "affectedRows": affected}

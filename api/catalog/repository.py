"""
Table metadata queries (raw SQL).
"""

from __future__ import annotations

from core.db import QueryExecutor
from core.sql import escape_id


async def list_tables(executor: QueryExecutor, db_name: str) -> list[str]:
    """
    Table names of the connected database, in `SHOW TABLES` order.
    """
    rows = await executor.fetch_all("SHOW TABLES")
    column = f"Tables_in_{db_name}"
    names: list[str] = []
    for row in rows:
        value = row.get(column)
        if value is None and row:
            # Column label follows the server's casing of the schema name.
            value = next(iter(row.values()))
        if value:
            names.append(str(value))
    return names


async def table_exists(executor: QueryExecutor, table: str) -> bool:
    row = await executor.fetch_one(
        """
        SELECT 1 AS ok
        FROM information_schema.TABLES
        WHERE TABLE_SCHEMA = DATABASE()
          AND TABLE_NAME = %s
        LIMIT 1
        """,
        [table],
    )
    return row is not None


async def describe_table(executor: QueryExecutor, table: str) -> list[dict]:
    return await executor.fetch_all(f"DESCRIBE {escape_id(table)}")

"""
Schema discovery: turn live table metadata into collection schemas.
"""

from __future__ import annotations

import logging

from core.db import QueryExecutor
from core.errors import NotFoundError

from . import mapper, repository

logger = logging.getLogger(__name__)


async def find_schemas(executor: QueryExecutor, schema_ids: list[str]) -> dict:
    """
    Schemas for the named tables only. Unknown tables are skipped.
    """
    schemas = []
    for table in schema_ids:
        if not await repository.table_exists(executor, table):
            logger.warning("schema_table_missing table=%s", table)
            continue
        columns = await repository.describe_table(executor, table)
        fields = mapper.map_fields(columns, with_system_fields=True)
        schemas.append(mapper.collection_schema(table, fields))
    return {"schemas": schemas}


async def list_schemas(executor: QueryExecutor, *, db_name: str) -> dict:
    tables = await repository.list_tables(executor, db_name)
    if not tables:
        raise NotFoundError("No tables found in the database.")

    schemas = []
    for table in tables:
        columns = await repository.describe_table(executor, table)
        schemas.append(mapper.collection_schema(table, mapper.map_fields(columns)))
    return {"schemas": schemas}

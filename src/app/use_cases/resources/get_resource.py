"""GetResource Use Case

Fetches one row of a resource, including joined display fields.
"""

import logging
from typing import Any, Dict, Optional
from libs.result import Result, Return
from src.app.errors import error_code, not_found, retrieval_failed
from src.app.query.resource import ResourceConfig
from src.app.services.sql_executor import SqlExecutor

logger = logging.getLogger(__name__)


class GetResource:
    def __init__(self, executor: SqlExecutor):
        self.executor = executor

    async def fetch(self, resource: ResourceConfig, entity_id: int) -> Optional[Dict[str, Any]]:
        """
        Read one row with the resource's joins

        Raises store errors to the caller.
        """
        sql = (
            f"SELECT {resource.columns} FROM {resource.from_clause} "
            f"WHERE {resource.alias}.id = :id"
        )
        rows = await self.executor.execute(sql, {"id": entity_id})
        return rows[0] if rows else None

    async def execute(self, resource: ResourceConfig, entity_id: int) -> Result[Dict[str, Any]]:
        try:
            row = await self.fetch(resource, entity_id)
        except Exception as e:
            logger.error(f"Get {resource.noun} error: {e}")
            return Return.err(
                retrieval_failed(
                    code=error_code(resource.label, "RETRIEVE_FAILED"),
                    message=f"Failed to retrieve {resource.noun}",
                    exc=e,
                )
            )

        if row is None:
            return Return.err(not_found(resource.label, entity_id))
        return Return.ok(row)

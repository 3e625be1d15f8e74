"""ListResources Use Case

Paginated, filtered, sorted listing for any configured resource.
"""

import logging
from typing import Any, Dict, Mapping
from libs.result import Result, Return
from src.app.errors import error_code, retrieval_failed
from src.app.query.list_query_executor import ListQueryExecutor
from src.app.query.page import PageEnvelope
from src.app.query.resource import ResourceConfig

logger = logging.getLogger(__name__)


class ListResources:
    """
    Use Case: List a resource page

    Flow:
    1. Resolve pagination, sort and allow-listed filters from query params
    2. Count matching rows
    3. Fetch the requested page
    4. Return a PageEnvelope; any store error fails the whole call
    """

    def __init__(self, list_executor: ListQueryExecutor):
        self.list_executor = list_executor

    async def execute(
        self, resource: ResourceConfig, params: Mapping[str, Any]
    ) -> Result[PageEnvelope[Dict[str, Any]]]:
        try:
            page = await self.list_executor.list(resource, params)
            return Return.ok(page)
        except Exception as e:
            logger.error(f"Get {resource.name} error: {e}")
            return Return.err(
                retrieval_failed(
                    code=error_code(resource.label, "RETRIEVE_FAILED"),
                    message=f"Failed to retrieve {resource.plural_label}",
                    exc=e,
                )
            )

"""ProjectFinancials Use Case"""

import logging
from typing import Any, Dict
from libs.result import Result, Return
from src.app.errors import not_found, retrieval_failed
from src.app.services.sql_executor import SqlExecutor

logger = logging.getLogger(__name__)

PROJECT_SQL = "SELECT * FROM projects WHERE id = :project_id"
INVOICES_SQL = (
    "SELECT * FROM invoices WHERE project_id = :project_id ORDER BY date DESC, id DESC"
)
PAYMENTS_SQL = """
    SELECT pay.*, i.invoice_number AS invoice_number
    FROM payments pay
    JOIN invoices i ON pay.invoice_id = i.id
    WHERE i.project_id = :project_id
    ORDER BY pay.date DESC, pay.id DESC
"""
JOB_COSTS_SQL = "SELECT * FROM job_costs WHERE project_id = :project_id ORDER BY id"


class ProjectFinancials:
    """Project row with its invoices, payments and job costs."""

    def __init__(self, executor: SqlExecutor):
        self.executor = executor

    async def execute(self, project_id: int) -> Result[Dict[str, Any]]:
        params = {"project_id": project_id}
        try:
            projects = await self.executor.execute(PROJECT_SQL, params)
            if not projects:
                return Return.err(not_found("Project", project_id))

            return Return.ok(
                {
                    "project": projects[0],
                    "invoices": await self.executor.execute(INVOICES_SQL, params),
                    "payments": await self.executor.execute(PAYMENTS_SQL, params),
                    "job_costs": await self.executor.execute(JOB_COSTS_SQL, params),
                }
            )

        except Exception as e:
            logger.error(f"Get project financials error: {e}")
            return Return.err(
                retrieval_failed(
                    code="PROJECT_FINANCIALS_FAILED",
                    message="Failed to retrieve project financials",
                    exc=e,
                )
            )

"""FinancialStats Use Case

Portfolio-wide invoice, payment and per-project money figures.
"""

import logging
from decimal import Decimal
from typing import Any, Dict
from libs.result import Result, Return
from src.app.errors import retrieval_failed
from src.app.services.sql_executor import SqlExecutor
from src.domain.invoice import InvoiceStatus

logger = logging.getLogger(__name__)

INVOICE_STATS_SQL = """
    SELECT
        COUNT(*) AS total_invoices,
        COALESCE(SUM(amount), 0) AS total_invoice_amount,
        COALESCE(SUM(CASE WHEN status = :paid THEN amount ELSE 0 END), 0) AS paid_amount,
        COALESCE(SUM(CASE WHEN status = :pending THEN amount ELSE 0 END), 0) AS pending_amount,
        COALESCE(SUM(CASE WHEN status = :overdue THEN amount ELSE 0 END), 0) AS overdue_amount
    FROM invoices
"""

PAYMENT_STATS_SQL = """
    SELECT
        COUNT(*) AS total_payments,
        COALESCE(SUM(amount), 0) AS total_payment_amount
    FROM payments
"""

# Correlated subqueries keep each sum independent of the other joins.
PROJECT_FINANCIALS_SQL = """
    SELECT
        p.id,
        p.name,
        p.budget,
        (SELECT COALESCE(SUM(jc.actual_cost), 0)
           FROM job_costs jc WHERE jc.project_id = p.id) AS actual_cost,
        (SELECT COALESCE(SUM(i.amount), 0)
           FROM invoices i WHERE i.project_id = p.id) AS invoices_raised,
        (SELECT COALESCE(SUM(pay.amount), 0)
           FROM payments pay JOIN invoices i2 ON pay.invoice_id = i2.id
          WHERE i2.project_id = p.id) AS payments_received
    FROM projects p
    ORDER BY p.id
"""

MONEY_FIELDS = (
    "total_invoice_amount",
    "paid_amount",
    "pending_amount",
    "overdue_amount",
    "total_payment_amount",
    "budget",
    "actual_cost",
    "invoices_raised",
    "payments_received",
)


def _as_money(row: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(row)
    for field in MONEY_FIELDS:
        if data.get(field) is not None:
            data[field] = Decimal(str(data[field]))
    return data


class FinancialStats:
    def __init__(self, executor: SqlExecutor):
        self.executor = executor

    async def execute(self) -> Result[Dict[str, Any]]:
        try:
            invoice_rows = await self.executor.execute(
                INVOICE_STATS_SQL,
                {
                    "paid": InvoiceStatus.PAID.value,
                    "pending": InvoiceStatus.PENDING.value,
                    "overdue": InvoiceStatus.OVERDUE.value,
                },
            )
            payment_rows = await self.executor.execute(PAYMENT_STATS_SQL, {})
            project_rows = await self.executor.execute(PROJECT_FINANCIALS_SQL, {})

            return Return.ok(
                {
                    "invoices": _as_money(invoice_rows[0]),
                    "payments": _as_money(payment_rows[0]),
                    "projects": [_as_money(row) for row in project_rows],
                }
            )

        except Exception as e:
            logger.error(f"Get financial stats error: {e}")
            return Return.err(
                retrieval_failed(
                    code="FINANCIAL_STATS_FAILED",
                    message="Failed to retrieve financial statistics",
                    exc=e,
                )
            )

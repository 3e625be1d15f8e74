"""GetInvoice Use Case

Invoice header with project name, its line items and its payments.
"""

import logging
from typing import Any, Dict
from libs.result import Result, Return
from src.app.errors import not_found, retrieval_failed
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.resources import INVOICES
from src.app.services.sql_executor import SqlExecutor
from src.app.use_cases.resources.get_resource import GetResource

logger = logging.getLogger(__name__)


class GetInvoice:
    def __init__(
        self,
        executor: SqlExecutor,
        invoice_line_repo: InvoiceLineRepository,
        payment_repo: PaymentRepository,
    ):
        self.get_resource = GetResource(executor)
        self.invoice_line_repo = invoice_line_repo
        self.payment_repo = payment_repo

    async def execute(self, invoice_id: int) -> Result[Dict[str, Any]]:
        try:
            invoice = await self.get_resource.fetch(INVOICES, invoice_id)
            if invoice is None:
                return Return.err(not_found("Invoice", invoice_id))

            lines = await self.invoice_line_repo.get_by_invoice_id(invoice_id)
            payments = await self.payment_repo.get_by_invoice_id(invoice_id)
            invoice["items"] = [line.model_dump() for line in lines]
            invoice["payments"] = [payment.model_dump() for payment in payments]
            return Return.ok(invoice)

        except Exception as e:
            logger.error(f"Get invoice error: {e}")
            return Return.err(
                retrieval_failed(
                    code="INVOICE_RETRIEVE_FAILED",
                    message="Failed to retrieve invoice",
                    exc=e,
                )
            )

"""DeleteInvoice Use Case

Removes an invoice together with everything that references it.
"""

import logging
from libs.result import Result, Return
from src.app.errors import not_found, transaction_failed
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Dependents go first, innermost first: line items, then payments, then
    the header. All three deletes commit as one unit.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.payment_repo = payment_repo

    async def execute(self, invoice_id: int) -> Result[None]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if invoice is None:
                return Return.err(not_found("Invoice", invoice_id))

            items_deleted = await self.invoice_line_repo.delete_by_invoice_id(invoice_id)
            payments_deleted = await self.payment_repo.delete_by_invoice_id(invoice_id)
            await self.invoice_repo.delete(invoice_id)

            await self.uow.commit()

            logger.info(
                f"Deleted invoice {invoice.invoice_number} "
                f"({items_deleted} items, {payments_deleted} payments)"
            )
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Delete invoice error: {e}")
            return Return.err(
                transaction_failed(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    exc=e,
                )
            )

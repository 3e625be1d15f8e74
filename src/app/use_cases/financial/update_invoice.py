"""UpdateInvoice Use Case

Rewrites an invoice header and replaces its line items wholesale.
"""

import logging
from libs.result import Result, Return
from src.app.errors import not_found, transaction_failed
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.invoice_line import InvoiceLine, invoice_total, line_amount
from .create_invoice import to_invoice_response
from .dtos import InvoiceResponseDTO, UpdateInvoiceCommandDTO

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update invoice and its line items

    Business Rules:
    1. Invoice must exist (checked before any write)
    2. amount is recomputed from the submitted items
    3. Existing items are deleted and the submitted ones re-inserted
    4. Status only changes when explicitly supplied

    Flow:
    1. Load invoice (404 if missing)
    2. Update header
    3. Delete existing items
    4. Insert submitted items
    5. Commit transaction (rollback on any failure)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        try:
            # Step 1: Existence check
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)
            if invoice is None:
                return Return.err(not_found("Invoice", command.invoice_id))

            # Step 2: Update header with recomputed amount
            invoice.project_id = command.project_id
            invoice.client = command.client
            invoice.date = command.date
            invoice.due_date = command.due_date
            invoice.grn_ref = command.grn_ref
            invoice.notes = command.notes
            invoice.amount = invoice_total(command.items)
            if command.status is not None:
                invoice.status = command.status.value
            invoice = await self.invoice_repo.update(invoice)

            # Step 3: Drop existing items
            await self.invoice_line_repo.delete_by_invoice_id(invoice.id)

            # Step 4: Re-insert submitted items
            lines = []
            for item in command.items:
                line = await self.invoice_line_repo.create(
                    InvoiceLine(
                        invoice_id=invoice.id,
                        description=item.description,
                        quantity=item.quantity,
                        rate=item.rate,
                        amount=line_amount(item.quantity, item.rate),
                    )
                )
                lines.append(line)

            # Step 5: Commit transaction
            await self.uow.commit()

            return Return.ok(to_invoice_response(invoice, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Update invoice error: {e}")
            return Return.err(
                transaction_failed(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    exc=e,
                )
            )

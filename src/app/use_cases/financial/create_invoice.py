"""CreateInvoice Use Case

Creates an invoice header and its line items as one unit.
"""

import logging
from libs.result import Result, Return
from src.app.errors import transaction_failed
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.identifier_generator import EntityIdentifierGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine, invoice_total, line_amount
from .dtos import CreateInvoiceCommandDTO, InvoiceLineDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice with line items

    Business Rules:
    1. amount = sum(quantity * rate) over the submitted items
    2. Invoice number is auto-generated (INV-YYYY-NNN)
    3. Invoice is created with status=Pending
    4. Header and items persist together or not at all

    Flow:
    1. Compute amount from items
    2. Generate invoice number
    3. Insert header
    4. Insert one row per line item
    5. Commit transaction (rollback on any failure)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        id_generator: EntityIdentifierGenerator,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.id_generator = id_generator

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with header fields and items

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: Derive amount from items
            amount = invoice_total(command.items)

            # Step 2: Generate invoice number
            invoice_number = await self.id_generator.next_identifier(
                "invoices", "INV", with_year=True
            )

            # Step 3: Insert header with status=Pending
            invoice = await self.invoice_repo.create(
                Invoice(
                    invoice_number=invoice_number,
                    project_id=command.project_id,
                    client=command.client,
                    date=command.date,
                    due_date=command.due_date,
                    amount=amount,
                    grn_ref=command.grn_ref,
                    notes=command.notes,
                    status=InvoiceStatus.PENDING.value,
                )
            )

            # Step 4: Insert line items
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

            logger.info(f"Created invoice {invoice_number} with {len(lines)} items, amount={amount}")
            return Return.ok(to_invoice_response(invoice, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Create invoice error: {e}")
            return Return.err(
                transaction_failed(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    exc=e,
                )
            )


def to_invoice_response(invoice: Invoice, lines) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        project_id=invoice.project_id,
        client=invoice.client,
        date=invoice.date,
        due_date=invoice.due_date,
        amount=invoice.amount,
        status=invoice.status,
        items=[
            InvoiceLineDTO(
                id=line.id,
                description=line.description,
                quantity=line.quantity,
                rate=line.rate,
                amount=line.amount,
            )
            for line in lines
        ],
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )

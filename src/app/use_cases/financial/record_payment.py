"""RecordPayment Use Case

Records a payment against an invoice and marks the invoice Paid once
payments cover its amount.
"""

import logging
from libs.result import Result, Return
from src.app.errors import not_found, transaction_failed
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.identifier_generator import EntityIdentifierGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.invoice import InvoiceStatus
from src.domain.payment import Payment
from .dtos import PaymentResponseDTO, RecordPaymentCommandDTO

logger = logging.getLogger(__name__)


class RecordPayment:
    """
    Use Case: Record payment

    Business Rules:
    1. Invoice must exist; checked before any write
    2. Payment ID is auto-generated (PAY-YYYY-NNN)
    3. When total paid >= invoice amount, invoice becomes Paid
    4. Status never moves back from Paid because of a payment
    5. Payment and status change persist together or not at all

    Flow:
    1. Load invoice (404 if missing)
    2. Generate payment ID
    3. Insert payment
    4. Sum payments for the invoice, including the new one
    5. Flip status to Paid if fully covered
    6. Commit transaction (rollback on any failure)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        payment_repo: PaymentRepository,
        id_generator: EntityIdentifierGenerator,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.payment_repo = payment_repo
        self.id_generator = id_generator

    async def execute(self, command: RecordPaymentCommandDTO) -> Result[PaymentResponseDTO]:
        """
        Execute payment recording

        Args:
            command: RecordPaymentCommandDTO with invoice_id, amount, date, method

        Returns:
            Result[PaymentResponseDTO]: Payment with paid-to-date total and
            resulting invoice status, or error
        """
        try:
            # Step 1: Existence check
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)
            if invoice is None:
                return Return.err(not_found("Invoice", command.invoice_id))

            invoice_amount = invoice.amount
            invoice_status = invoice.status

            # Step 2: Generate payment ID
            payment_id = await self.id_generator.next_identifier(
                "payments", "PAY", with_year=True
            )

            # Step 3: Insert payment
            payment = await self.payment_repo.create(
                Payment(
                    payment_id=payment_id,
                    invoice_id=command.invoice_id,
                    amount=command.amount,
                    date=command.date,
                    method=command.method.value,
                    reference=command.reference,
                    notes=command.notes,
                )
            )

            # Step 4: Paid-to-date including this payment
            total_paid = await self.payment_repo.total_paid(command.invoice_id)

            # Step 5: Flip to Paid once covered
            if total_paid >= invoice_amount and invoice_status != InvoiceStatus.PAID.value:
                await self.invoice_repo.update_status(command.invoice_id, InvoiceStatus.PAID.value)
                invoice_status = InvoiceStatus.PAID.value
                logger.info(f"Invoice {invoice.invoice_number} fully paid ({total_paid}/{invoice_amount})")

            # Step 6: Commit transaction
            await self.uow.commit()

            return Return.ok(
                PaymentResponseDTO(
                    id=payment.id,
                    payment_id=payment.payment_id,
                    invoice_id=payment.invoice_id,
                    amount=payment.amount,
                    date=payment.date,
                    method=payment.method,
                    reference=payment.reference,
                    total_paid=total_paid,
                    invoice_status=invoice_status,
                    created_at=payment.created_at,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Create payment error: {e}")
            return Return.err(
                transaction_failed(
                    code="RECORD_PAYMENT_FAILED",
                    message="Failed to record payment",
                    exc=e,
                )
            )

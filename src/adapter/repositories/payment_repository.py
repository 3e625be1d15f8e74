"""SQLAlchemy Payment Repository Implementation"""

from decimal import Decimal
from typing import List
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import Payment


class SqlAlchemyPaymentRepository(PaymentRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_invoice_id(self, invoice_id: int) -> List[Payment]:
        statement = (
            select(Payment)
            .where(Payment.invoice_id == invoice_id)
            .order_by(Payment.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def total_paid(self, invoice_id: int) -> Decimal:
        """
        Sum payments for an invoice

        Sees rows flushed earlier in the same transaction, including a
        payment that was just inserted.
        """
        statement = (
            select(func.coalesce(func.sum(Payment.amount), 0))
            .where(Payment.invoice_id == invoice_id)
        )
        result = await self.session.execute(statement)
        return Decimal(str(result.scalar_one()))

    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        statement = delete(Payment).where(Payment.invoice_id == invoice_id)
        result = await self.session.execute(statement)
        return result.rowcount or 0

"""Payment Repository Interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List
from src.domain.payment import Payment


class PaymentRepository(ABC):
    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """
        Create a new payment

        Args:
            payment: Payment entity to persist

        Returns:
            Created Payment with generated ID
        """
        pass

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[Payment]:
        pass

    @abstractmethod
    async def total_paid(self, invoice_id: int) -> Decimal:
        """
        Sum of all payment amounts recorded for an invoice

        Returns:
            Total paid, Decimal("0") when there are no payments
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        pass

"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Statements run inside the caller's unit of work; nothing here commits.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice header

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice header

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def update_status(self, invoice_id: int, status: str) -> None:
        """
        Set the status of an invoice

        Args:
            invoice_id: Invoice ID
            status: New status value
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: int) -> None:
        """
        Delete the invoice header

        Line items and payments must be removed first.

        Args:
            invoice_id: Invoice ID
        """
        pass

from .resource_repository import ResourceRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository
from .payment_repository import PaymentRepository

__all__ = [
    "ResourceRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
    "PaymentRepository",
]

"""Invoice Line Domain Entity

Tracks individual line items within an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, timestamp_column, utc_now


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - amount = quantity * rate
    - Replaced wholesale when the invoice is updated
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    invoice_id: int = Field(
        sa_column=Column(Integer, ForeignKey("invoices.id"), nullable=False),
        description="Foreign key to Invoice"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line item description (e.g., 'Site survey')"
    )

    quantity: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))

    rate: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Price per unit"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Line amount (quantity * rate)"
    )

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())


def line_amount(quantity: Decimal, rate: Decimal) -> Decimal:
    return Decimal(quantity) * Decimal(rate)


def invoice_total(items: Iterable) -> Decimal:
    """Sum of quantity * rate over anything with quantity and rate attributes"""
    return sum((line_amount(item.quantity, item.rate) for item in items), Decimal("0"))

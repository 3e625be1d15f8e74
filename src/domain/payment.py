"""Payment Domain Entity

A payment received against an invoice. Many payments per invoice.
"""

from datetime import datetime, date as date_type
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "Bank Transfer"
    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"
    CHECK = "Check"
    CASH = "Cash"


class Payment(BaseModel, table=True):
    """
    Payment - Money received for an invoice

    Domain Rules:
    - payment_id is unique (PAY-YYYY-NNN)
    - amount > 0
    - Once payments for an invoice reach its amount the invoice is Paid
    """

    __tablename__ = "payments"
    __table_args__ = (
        Index('ix_payments_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    payment_id: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique payment identifier (e.g., PAY-2024-001)"
    )

    invoice_id: int = Field(
        sa_column=Column(Integer, ForeignKey("invoices.id"), nullable=False),
        description="Foreign key to Invoice"
    )

    amount: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    date: date_type = Field(sa_column=Column(Date, nullable=False))

    method: str = Field(
        default=PaymentMethod.BANK_TRANSFER.value,
        sa_column=Column(String(20), nullable=False, default=PaymentMethod.BANK_TRANSFER.value)
    )

    reference: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

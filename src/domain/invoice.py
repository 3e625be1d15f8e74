"""Invoice Domain Entity

Tracks client invoices raised against a project and their payment status.
"""

from datetime import datetime, date as date_type
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


class Invoice(BaseModel, table=True):
    """
    Invoice - Client invoice for project work

    Domain Rules:
    - invoice_number must be unique (INV-YYYY-NNN)
    - amount is the sum of all invoice item amounts, never set directly
    - Created as Pending; moves to Paid once payments cover the amount
    - Overdue is only ever set explicitly
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_project_id', 'project_id'),
        Index('ix_invoices_status', 'status'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-2024-007)"
    )

    project_id: int = Field(
        sa_column=Column(Integer, ForeignKey("projects.id"), nullable=False),
        description="Foreign key to Project"
    )

    client: str = Field(sa_column=Column(String(255), nullable=False))

    date: date_type = Field(sa_column=Column(Date, nullable=False), description="Issue date")
    due_date: date_type = Field(sa_column=Column(Date, nullable=False))

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Total invoice amount (sum of item amounts)"
    )

    grn_ref: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    status: str = Field(
        default=InvoiceStatus.PENDING.value,
        sa_column=Column(String(20), nullable=False, default=InvoiceStatus.PENDING.value),
        description="Invoice status (Pending, Paid, Overdue)"
    )

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 7,
                "invoice_number": "INV-2024-007",
                "project_id": 1,
                "client": "Acme Holdings",
                "date": "2024-03-01",
                "due_date": "2024-03-31",
                "amount": "130.00",
                "status": "Pending",
            }
        }

"""Data Transfer Objects for Financial Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date as date_type
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from src.domain.invoice import InvoiceStatus
from src.domain.payment import PaymentMethod


class InvoiceItemDTO(BaseModel):
    """One submitted line item"""

    description: str = Field(
        ...,
        min_length=2,
        max_length=255,
        description="Line item description"
    )

    quantity: Decimal = Field(
        ...,
        gt=0,
        description="Quantity (must be > 0)"
    )

    rate: Decimal = Field(
        ...,
        gt=0,
        description="Price per unit (must be > 0)"
    )


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    The invoice amount is not part of the command; it is always derived from
    the line items.
    """

    project_id: int = Field(..., gt=0, description="Project the invoice is raised against")
    client: str = Field(..., min_length=2, max_length=255)
    date: date_type = Field(..., description="Issue date")
    due_date: date_type = Field(..., description="Due date (after issue date)")
    grn_ref: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = Field(default=None, max_length=1000)
    items: List[InvoiceItemDTO] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_dates(self):
        if self.due_date <= self.date:
            raise ValueError("due_date must be after date")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "project_id": 1,
                "client": "Acme Holdings",
                "date": "2024-03-01",
                "due_date": "2024-03-31",
                "items": [
                    {"description": "Site survey", "quantity": "2", "rate": "50.00"},
                    {"description": "Report", "quantity": "1", "rate": "30.00"},
                ],
            }
        }


class UpdateInvoiceCommandDTO(CreateInvoiceCommandDTO):
    """
    Command DTO for updating an invoice

    Items replace the existing items wholesale. Status is left unchanged when
    omitted.
    """

    invoice_id: int = Field(..., gt=0)
    status: Optional[InvoiceStatus] = Field(default=None)


class RecordPaymentCommandDTO(BaseModel):
    """Command DTO for recording a payment against an invoice"""

    invoice_id: int = Field(..., gt=0)
    amount: Decimal = Field(..., gt=0, description="Amount received (must be > 0)")
    date: date_type
    method: PaymentMethod = Field(default=PaymentMethod.BANK_TRANSFER)
    reference: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=1000)


class InvoiceLineDTO(BaseModel):
    id: int
    description: str
    quantity: Decimal
    rate: Decimal
    amount: Decimal


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice writes

    Returned by CreateInvoice and UpdateInvoice.
    """

    invoice_id: int
    invoice_number: str
    project_id: int
    client: str
    date: date_type
    due_date: date_type
    amount: Decimal
    status: str
    items: List[InvoiceLineDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class PaymentResponseDTO(BaseModel):
    """
    Response DTO for RecordPayment

    Carries the invoice's paid-to-date total and resulting status.
    """

    id: int
    payment_id: str
    invoice_id: int
    amount: Decimal
    date: date_type
    method: str
    reference: Optional[str] = None
    total_paid: Decimal
    invoice_status: str
    created_at: datetime

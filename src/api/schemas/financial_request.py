"""Request schemas for Financial API

Pydantic models for validating incoming invoice and payment requests.
"""

from datetime import date as date_type
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from src.domain.invoice import InvoiceStatus
from src.domain.payment import PaymentMethod


class InvoiceItemSchema(BaseModel):
    description: str = Field(..., min_length=2, max_length=255)
    quantity: Decimal = Field(..., gt=0, description="Quantity (must be > 0)")
    rate: Decimal = Field(..., gt=0, description="Price per unit (must be > 0)")


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /financial/invoices. The amount is computed from items.
    """

    project_id: int = Field(..., gt=0)
    client: str = Field(..., min_length=2, max_length=255)
    date: date_type
    due_date: date_type
    grn_ref: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = Field(default=None, max_length=1000)
    items: List[InvoiceItemSchema] = Field(..., min_length=1)

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
                "grn_ref": "GRN-118",
                "items": [
                    {"description": "Site survey", "quantity": 2, "rate": "50.00"},
                    {"description": "Report", "quantity": 1, "rate": "30.00"},
                ],
            }
        }


class InvoiceUpdateRequestSchema(InvoiceRequestSchema):
    """Used for PUT /financial/invoices/{id}; items replace existing ones"""

    status: Optional[InvoiceStatus] = None


class PaymentRequestSchema(BaseModel):
    """
    Request schema for recording a payment

    Used for POST /financial/payments.
    """

    invoice_id: int = Field(..., gt=0)
    amount: Decimal = Field(..., gt=0, description="Amount received (must be > 0)")
    date: date_type
    method: PaymentMethod = Field(default=PaymentMethod.BANK_TRANSFER)
    reference: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=1000)

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "amount": "60.00",
                "date": "2024-03-10",
                "method": "Bank Transfer",
                "reference": "TRX-5531",
            }
        }

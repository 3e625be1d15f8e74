"""RFQ Domain Entity

Requests for quotation received from prospective clients.
"""

from datetime import datetime, date as date_type
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class RfqStatus(str, Enum):
    SUBMITTED = "Submitted"
    WON = "Won"
    LOST = "Lost"


class Rfq(BaseModel, table=True):
    """
    RFQ - Request for quotation

    Domain Rules:
    - rfq_code is unique (RFQ-001)
    - Not tied to a project row; `project` names the prospective work
    """

    __tablename__ = "rfqs"
    __table_args__ = (
        Index('ix_rfqs_status', 'status'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    rfq_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    client: str = Field(sa_column=Column(String(255), nullable=False))
    project: str = Field(sa_column=Column(String(255), nullable=False))
    date: date_type = Field(sa_column=Column(Date, nullable=False), description="Date received")
    location: str = Field(sa_column=Column(String(255), nullable=False))
    value: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Estimated value of the work"
    )

    scope_summary: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    contact_person: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    contact_email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    contact_phone: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))
    deadline: Optional[date_type] = Field(default=None, sa_column=Column(Date, nullable=True))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    status: str = Field(default=RfqStatus.SUBMITTED.value, max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

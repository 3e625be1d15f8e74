"""Contract Domain Entity"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class ContractStatus(str, Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    TERMINATED = "Terminated"


class Contract(BaseModel, table=True):
    """
    Contract - Signed agreement with a client for a project

    Domain Rules:
    - contract_code is unique (CON-001)
    - end_date is after start_date
    """

    __tablename__ = "contracts"
    __table_args__ = (
        Index('ix_contracts_project_id', 'project_id'),
        Index('ix_contracts_status', 'status'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    contract_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    project_id: int = Field(
        sa_column=Column(Integer, ForeignKey("projects.id"), nullable=False)
    )

    client: str = Field(sa_column=Column(String(255), nullable=False))
    value: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Contract value"
    )

    signed_date: date = Field(sa_column=Column(Date, nullable=False))
    start_date: date = Field(sa_column=Column(Date, nullable=False))
    end_date: date = Field(sa_column=Column(Date, nullable=False))

    manager: str = Field(sa_column=Column(String(255), nullable=False))
    client_rep: Optional[str] = Field(default=None, sa_column=Column(String(500), nullable=True))
    payment_terms: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    status: str = Field(default=ContractStatus.ACTIVE.value, max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

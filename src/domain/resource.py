"""Resource Domain Entity

People and subcontractors available to staff project tasks.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String
from src.domain.base import BaseModel, timestamp_column, utc_now


class Availability(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"


class Resource(BaseModel, table=True):
    """Resource - A person or crew with a role and billing rate"""

    __tablename__ = "resources"
    __table_args__ = (
        Index('ix_resources_role', 'role'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(sa_column=Column(String(255), nullable=False))
    role: str = Field(sa_column=Column(String(100), nullable=False))
    subcontractor: str = Field(sa_column=Column(String(255), nullable=False))
    rate: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Billing rate per hour"
    )
    availability: str = Field(default=Availability.FULL_TIME.value, max_length=20)
    assigned_tasks: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

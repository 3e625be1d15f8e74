"""Material Domain Entity

Procured materials and their delivery status.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class MaterialStatus(str, Enum):
    PROCESSING = "Processing"
    ORDERED = "Ordered"
    PENDING = "Pending"
    DELIVERED = "Delivered"


class Material(BaseModel, table=True):
    """
    Material - A purchase order line for project materials

    Domain Rules:
    - material_code is unique (MAT-001)
    - total_cost = qty * unit_cost, never set directly
    """

    __tablename__ = "materials"
    __table_args__ = (
        Index('ix_materials_project_id', 'project_id'),
        Index('ix_materials_status', 'status'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    material_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    name: str = Field(sa_column=Column(String(255), nullable=False))

    project_id: int = Field(
        sa_column=Column(Integer, ForeignKey("projects.id"), nullable=False)
    )

    supplier: str = Field(sa_column=Column(String(255), nullable=False))
    qty: int = Field(sa_column=Column(Integer, nullable=False))
    unit_cost: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    total_cost: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="qty * unit_cost"
    )
    po_no: str = Field(sa_column=Column(String(50), nullable=False))

    planned_date: date = Field(sa_column=Column(Date, nullable=False))
    actual_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))

    status: str = Field(default=MaterialStatus.PROCESSING.value, max_length=20)
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())


def with_material_total(values: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of material values with total_cost filled in"""
    result = dict(values)
    qty = Decimal(str(result.get("qty") or 0))
    unit_cost = Decimal(str(result.get("unit_cost") or 0))
    result["total_cost"] = qty * unit_cost
    return result

"""Quality Inspection Domain Entity"""

from datetime import datetime, date as date_type
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class InspectionStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"


class HseLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class InspectionSeverity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Inspection(BaseModel, table=True):
    """
    Inspection - Quality and HSE inspection, optionally of a task

    Domain Rules:
    - inspection_code is unique (INSP-001)
    - New inspections start Open
    """

    __tablename__ = "quality_inspections"
    __table_args__ = (
        Index('ix_quality_inspections_task_id', 'task_id'),
        Index('ix_quality_inspections_status', 'status'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    inspection_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    task_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("tasks.id"), nullable=True)
    )

    date: date_type = Field(sa_column=Column(Date, nullable=False))
    inspector: str = Field(sa_column=Column(String(255), nullable=False))
    snags: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    status: str = Field(default=InspectionStatus.OPEN.value, max_length=10)
    hse_issues: str = Field(default=HseLevel.MEDIUM.value, max_length=10)
    severity: str = Field(default=InspectionSeverity.MEDIUM.value, max_length=10)
    photo_url: Optional[str] = Field(default=None, sa_column=Column(String(500), nullable=True))

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

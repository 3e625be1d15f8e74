"""Project Domain Entity

Projects are the parent of milestones, risks, job costs and invoices.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class ProjectStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"
    CANCELLED = "Cancelled"


class ProjectPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Project(BaseModel, table=True):
    """
    Project - A client engagement with a budget and schedule

    Domain Rules:
    - project_code is unique (PRJ-001)
    - end_date is after start_date
    """

    __tablename__ = "projects"
    __table_args__ = (
        Index('ix_projects_status', 'status'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    project_code: str = Field(
        sa_column=Column(String(20), nullable=False, unique=True),
        description="Business identifier (e.g., PRJ-001)"
    )

    name: str = Field(sa_column=Column(String(255), nullable=False))
    client: str = Field(sa_column=Column(String(255), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    start_date: date = Field(sa_column=Column(Date, nullable=False))
    end_date: date = Field(sa_column=Column(Date, nullable=False))

    budget: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Approved budget"
    )

    status: str = Field(default=ProjectStatus.NOT_STARTED.value, max_length=20)
    priority: str = Field(default=ProjectPriority.MEDIUM.value, max_length=10)
    manager_id: Optional[int] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

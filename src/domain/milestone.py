"""Milestone Domain Entity"""

from datetime import datetime, date
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, String, Date
from src.domain.base import BaseModel, timestamp_column, utc_now


class MilestoneStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    PENDING = "Pending"
    DELAYED = "Delayed"


class Milestone(BaseModel, table=True):
    """Milestone - A dated checkpoint within a project"""

    __tablename__ = "milestones"
    __table_args__ = (
        Index('ix_milestones_project_id', 'project_id'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    milestone_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    project_id: int = Field(
        sa_column=Column(Integer, ForeignKey("projects.id"), nullable=False)
    )

    name: str = Field(sa_column=Column(String(255), nullable=False))
    planned_date: date = Field(sa_column=Column(Date, nullable=False))
    actual_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    status: str = Field(default=MilestoneStatus.NOT_STARTED.value, max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

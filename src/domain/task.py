"""Task Domain Entity

Assignable unit of project work with a schedule and progress.
"""

from datetime import datetime, date
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, String, Date, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class TaskStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Task(BaseModel, table=True):
    """
    Task - Work item within a project

    Domain Rules:
    - task_code is unique (TSK-001)
    - due_date is after start_date
    - progress is a percentage between 0 and 100
    """

    __tablename__ = "tasks"
    __table_args__ = (
        Index('ix_tasks_project_id', 'project_id'),
        Index('ix_tasks_assignee_id', 'assignee_id'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    task_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    title: str = Field(sa_column=Column(String(255), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    project_id: int = Field(
        sa_column=Column(Integer, ForeignKey("projects.id"), nullable=False)
    )
    assignee_id: Optional[int] = Field(default=None, description="User id from the upstream directory")

    start_date: date = Field(sa_column=Column(Date, nullable=False))
    due_date: date = Field(sa_column=Column(Date, nullable=False))

    priority: str = Field(default=TaskPriority.MEDIUM.value, max_length=10)
    status: str = Field(default=TaskStatus.NOT_STARTED.value, max_length=20)
    progress: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

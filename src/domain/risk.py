"""Risk Domain Entity

Tracks project risks and their mitigation.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, String, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskImpact(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class RiskStatus(str, Enum):
    OPEN = "Open"
    MONITORING = "Monitoring"
    MITIGATED = "Mitigated"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class Risk(BaseModel, table=True):
    """
    Risk - A identified threat to a project

    Domain Rules:
    - risk_code is unique (RISK-001)
    - New risks start Open
    """

    __tablename__ = "risks"
    __table_args__ = (
        Index('ix_risks_project_id', 'project_id'),
        Index('ix_risks_status', 'status'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    risk_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    project_id: int = Field(
        sa_column=Column(Integer, ForeignKey("projects.id"), nullable=False)
    )

    description: str = Field(sa_column=Column(Text, nullable=False))
    level: str = Field(default=RiskLevel.MEDIUM.value, max_length=10)
    impact: str = Field(default=RiskImpact.MEDIUM.value, max_length=10)
    probability: str = Field(default=RiskLevel.MEDIUM.value, max_length=10)
    mitigation_plan: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    owner: str = Field(sa_column=Column(String(255), nullable=False))
    status: str = Field(default=RiskStatus.OPEN.value, max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

"""Job Cost Domain Entity

Estimated vs. actual cost of a unit of project work.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, timestamp_column, utc_now

ESTIMATE_COMPONENTS = ("estimated_labor", "estimated_material", "overhead")
ACTUAL_COMPONENTS = ("actual_labor", "actual_material", "actual_overhead")


class JobCostStatus(str, Enum):
    ESTIMATED = "Estimated"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


def _money() -> Column:
    return Column(Numeric(18, 2), nullable=False, default=0)


class JobCost(BaseModel, table=True):
    """
    Job Cost - Cost breakdown for a project task

    Domain Rules:
    - estimated_cost = estimated_labor + estimated_material + overhead
    - actual_cost = actual_labor + actual_material + actual_overhead
    - variance = estimated_cost - actual_cost
    """

    __tablename__ = "job_costs"
    __table_args__ = (
        Index('ix_job_costs_project_id', 'project_id'),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    job_code: str = Field(sa_column=Column(String(20), nullable=False, unique=True))

    project_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("projects.id"), nullable=True)
    )

    task: str = Field(sa_column=Column(String(255), nullable=False))
    resource: str = Field(sa_column=Column(String(255), nullable=False))

    estimated_labor: Decimal = Field(default=Decimal("0"), sa_column=_money())
    estimated_material: Decimal = Field(default=Decimal("0"), sa_column=_money())
    overhead: Decimal = Field(default=Decimal("0"), sa_column=_money())
    estimated_cost: Decimal = Field(default=Decimal("0"), sa_column=_money())

    actual_labor: Decimal = Field(default=Decimal("0"), sa_column=_money())
    actual_material: Decimal = Field(default=Decimal("0"), sa_column=_money())
    actual_overhead: Decimal = Field(default=Decimal("0"), sa_column=_money())
    actual_cost: Decimal = Field(default=Decimal("0"), sa_column=_money())

    variance: Decimal = Field(default=Decimal("0"), sa_column=_money())

    status: str = Field(default=JobCostStatus.ESTIMATED.value, max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())


def with_cost_totals(values: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of job cost values with the derived totals filled in"""
    result = dict(values)
    estimated = sum((Decimal(str(result.get(k) or 0)) for k in ESTIMATE_COMPONENTS), Decimal("0"))
    actual = sum((Decimal(str(result.get(k) or 0)) for k in ACTUAL_COMPONENTS), Decimal("0"))
    result["estimated_cost"] = estimated
    result["actual_cost"] = actual
    result["variance"] = estimated - actual
    return result

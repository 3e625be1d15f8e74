"""Request schemas for project resources

Create and update share one schema per resource: updates replace every
writable field.
"""

from datetime import date, date as date_type
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from src.domain.contract import ContractStatus
from src.domain.inspection import HseLevel, InspectionSeverity, InspectionStatus
from src.domain.job_cost import JobCostStatus
from src.domain.material import MaterialStatus
from src.domain.milestone import MilestoneStatus
from src.domain.project import ProjectPriority, ProjectStatus
from src.domain.resource import Availability
from src.domain.rfq import RfqStatus
from src.domain.risk import RiskImpact, RiskLevel, RiskStatus
from src.domain.task import TaskPriority, TaskStatus


class ProjectRequestSchema(BaseModel):
    """
    Request schema for creating or updating a project

    Used for POST /projects and PUT /projects/{id}.
    """

    name: str = Field(..., min_length=3, max_length=255)
    client: str = Field(..., min_length=2, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    start_date: date
    end_date: date
    budget: Decimal = Field(..., gt=0, description="Approved budget (must be > 0)")
    status: ProjectStatus = Field(default=ProjectStatus.NOT_STARTED)
    priority: ProjectPriority = Field(default=ProjectPriority.MEDIUM)
    manager_id: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_dates(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

    class Config:
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "name": "Harbour Office Fit-out",
                "client": "Acme Holdings",
                "start_date": "2024-01-15",
                "end_date": "2024-09-30",
                "budget": "250000.00",
                "priority": "High",
            }
        }


class MilestoneRequestSchema(BaseModel):
    project_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=2, max_length=255)
    planned_date: date
    actual_date: Optional[date] = None
    status: MilestoneStatus = Field(default=MilestoneStatus.NOT_STARTED)

    class Config:
        use_enum_values = True


class RiskRequestSchema(BaseModel):
    """Request schema for creating or updating a risk"""

    project_id: int = Field(..., gt=0)
    description: str = Field(..., min_length=10, max_length=1000)
    level: RiskLevel = Field(default=RiskLevel.MEDIUM)
    impact: RiskImpact = Field(default=RiskImpact.MEDIUM)
    probability: RiskLevel = Field(default=RiskLevel.MEDIUM)
    mitigation_plan: Optional[str] = Field(default=None, max_length=1000)
    owner: str = Field(..., min_length=2, max_length=255)
    status: RiskStatus = Field(default=RiskStatus.OPEN)

    class Config:
        use_enum_values = True


class JobCostRequestSchema(BaseModel):
    """
    Request schema for creating or updating a job cost

    estimated_cost, actual_cost and variance are derived server-side and
    are not accepted here.
    """

    project_id: Optional[int] = Field(default=None, gt=0)
    task: str = Field(..., min_length=2, max_length=255)
    resource: str = Field(..., min_length=2, max_length=255)
    estimated_labor: Decimal = Field(default=Decimal("0"), ge=0)
    estimated_material: Decimal = Field(default=Decimal("0"), ge=0)
    overhead: Decimal = Field(default=Decimal("0"), ge=0)
    actual_labor: Decimal = Field(default=Decimal("0"), ge=0)
    actual_material: Decimal = Field(default=Decimal("0"), ge=0)
    actual_overhead: Decimal = Field(default=Decimal("0"), ge=0)
    status: JobCostStatus = Field(default=JobCostStatus.ESTIMATED)

    class Config:
        use_enum_values = True


class TaskRequestSchema(BaseModel):
    """Request schema for creating or updating a task"""

    title: str = Field(..., min_length=3, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    project_id: int = Field(..., gt=0)
    assignee_id: Optional[int] = Field(default=None, gt=0)
    start_date: date
    due_date: date
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)
    status: TaskStatus = Field(default=TaskStatus.NOT_STARTED)
    progress: int = Field(default=0, ge=0, le=100, description="Percent complete")

    @model_validator(mode="after")
    def validate_dates(self):
        if self.due_date <= self.start_date:
            raise ValueError("due_date must be after start_date")
        return self

    class Config:
        use_enum_values = True


class ContractRequestSchema(BaseModel):
    """Request schema for creating or updating a contract"""

    project_id: int = Field(..., gt=0)
    client: str = Field(..., min_length=2, max_length=255)
    value: Decimal = Field(..., gt=0)
    signed_date: date
    start_date: date
    end_date: date
    manager: str = Field(..., min_length=2, max_length=255)
    client_rep: Optional[str] = Field(default=None, max_length=500)
    payment_terms: Optional[str] = Field(default=None, max_length=1000)
    status: ContractStatus = Field(default=ContractStatus.ACTIVE)

    @model_validator(mode="after")
    def validate_dates(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

    class Config:
        use_enum_values = True


class RfqRequestSchema(BaseModel):
    client: str = Field(..., min_length=2, max_length=255)
    project: str = Field(..., min_length=3, max_length=255)
    date: date_type
    location: str = Field(..., min_length=2, max_length=255)
    value: Decimal = Field(..., ge=0)
    scope_summary: Optional[str] = Field(default=None, max_length=2000)
    contact_person: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[str] = Field(
        default=None, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
    )
    contact_phone: Optional[str] = Field(default=None, max_length=20)
    deadline: Optional[date_type] = None
    notes: Optional[str] = Field(default=None, max_length=1000)
    status: RfqStatus = Field(default=RfqStatus.SUBMITTED)

    class Config:
        use_enum_values = True


class MaterialRequestSchema(BaseModel):
    """
    Request schema for creating or updating a material order

    total_cost is derived server-side from qty and unit_cost.
    """

    name: str = Field(..., min_length=2, max_length=255)
    project_id: int = Field(..., gt=0)
    supplier: str = Field(..., min_length=2, max_length=255)
    qty: int = Field(..., gt=0)
    unit_cost: Decimal = Field(..., gt=0)
    po_no: str = Field(..., min_length=1, max_length=50)
    planned_date: date
    actual_date: Optional[date] = None
    status: MaterialStatus = Field(default=MaterialStatus.PROCESSING)
    notes: Optional[str] = Field(default=None, max_length=1000)

    class Config:
        use_enum_values = True


class InspectionRequestSchema(BaseModel):
    task_id: Optional[int] = Field(default=None, gt=0)
    date: date_type
    inspector: str = Field(..., min_length=2, max_length=255)
    snags: Optional[str] = Field(default=None, max_length=1000)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: InspectionStatus = Field(default=InspectionStatus.OPEN)
    hse_issues: HseLevel = Field(default=HseLevel.MEDIUM)
    severity: InspectionSeverity = Field(default=InspectionSeverity.MEDIUM)
    photo_url: Optional[str] = Field(default=None, max_length=500, pattern=r"^https?://")

    class Config:
        use_enum_values = True


class ResourceRequestSchema(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    role: str = Field(..., min_length=2, max_length=100)
    subcontractor: str = Field(..., min_length=2, max_length=255)
    rate: Decimal = Field(..., ge=0)
    availability: Availability = Field(default=Availability.FULL_TIME)
    assigned_tasks: int = Field(default=0, ge=0)

    class Config:
        use_enum_values = True

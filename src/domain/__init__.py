from .base import BaseModel
from .project import Project, ProjectStatus, ProjectPriority
from .milestone import Milestone, MilestoneStatus
from .risk import Risk, RiskLevel, RiskImpact, RiskStatus
from .job_cost import JobCost, JobCostStatus
from .task import Task, TaskStatus, TaskPriority
from .contract import Contract, ContractStatus
from .rfq import Rfq, RfqStatus
from .material import Material, MaterialStatus
from .inspection import Inspection, InspectionStatus, HseLevel, InspectionSeverity
from .resource import Resource, Availability
from .invoice import Invoice, InvoiceStatus
from .invoice_line import InvoiceLine
from .payment import Payment, PaymentMethod

__all__ = [
    "BaseModel",
    "Project",
    "ProjectStatus",
    "ProjectPriority",
    "Milestone",
    "MilestoneStatus",
    "Risk",
    "RiskLevel",
    "RiskImpact",
    "RiskStatus",
    "JobCost",
    "JobCostStatus",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "Contract",
    "ContractStatus",
    "Rfq",
    "RfqStatus",
    "Material",
    "MaterialStatus",
    "Inspection",
    "InspectionStatus",
    "HseLevel",
    "InspectionSeverity",
    "Resource",
    "Availability",
    "Invoice",
    "InvoiceStatus",
    "InvoiceLine",
    "Payment",
    "PaymentMethod",
]

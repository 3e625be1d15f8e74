"""Resource registry

Declarative configuration for every entity exposed through the generic
list/get/stats/write paths.
"""

from src.app.query.resource import ResourceConfig
from src.domain.contract import Contract, ContractStatus
from src.domain.inspection import HseLevel, Inspection, InspectionStatus
from src.domain.invoice import InvoiceStatus
from src.domain.job_cost import JobCost, JobCostStatus, with_cost_totals
from src.domain.material import Material, MaterialStatus, with_material_total
from src.domain.milestone import Milestone, MilestoneStatus
from src.domain.payment import PaymentMethod
from src.domain.project import Project, ProjectStatus, ProjectPriority
from src.domain.resource import Availability, Resource
from src.domain.rfq import Rfq, RfqStatus
from src.domain.risk import Risk, RiskImpact, RiskLevel, RiskStatus
from src.domain.task import Task, TaskPriority, TaskStatus


def _values(enum_cls) -> tuple:
    return tuple(member.value for member in enum_cls)


PROJECT_JOIN = "LEFT JOIN projects p ON {alias}.project_id = p.id"

PROJECTS = ResourceConfig(
    name="projects",
    label="Project",
    table="projects",
    alias="pr",
    model=Project,
    sortable_fields=("id", "name", "client", "start_date", "end_date", "status", "budget", "created_at"),
    filterable_fields=("status", "priority", "manager_id"),
    search_columns=("pr.name", "pr.client", "pr.description"),
    identifier_field="project_code",
    identifier_prefix="PRJ",
    stats_counts={"status": _values(ProjectStatus), "priority": _values(ProjectPriority)},
    stats_sums=("budget",),
)

MILESTONES = ResourceConfig(
    name="milestones",
    label="Milestone",
    table="milestones",
    alias="m",
    model=Milestone,
    select_columns="m.*, p.name AS project_name",
    joins=(PROJECT_JOIN.format(alias="m"),),
    sortable_fields=("id", "name", "planned_date", "actual_date", "status", "created_at"),
    filterable_fields=("status", "project_id"),
    search_columns=("m.name", "p.name"),
    identifier_field="milestone_code",
    identifier_prefix="MS",
    stats_counts={"status": _values(MilestoneStatus)},
)

RISKS = ResourceConfig(
    name="risks",
    label="Risk",
    table="risks",
    alias="r",
    model=Risk,
    select_columns="r.*, p.name AS project_name",
    joins=(PROJECT_JOIN.format(alias="r"),),
    sortable_fields=("id", "description", "level", "impact", "status", "created_at"),
    filterable_fields=("level", "impact", "status", "project_id"),
    search_columns=("r.description", "r.mitigation_plan", "r.owner", "p.name"),
    identifier_field="risk_code",
    identifier_prefix="RISK",
    stats_counts={
        "level": _values(RiskLevel),
        "impact": _values(RiskImpact),
        "status": _values(RiskStatus),
    },
)

JOB_COSTS = ResourceConfig(
    name="job_costs",
    label="Job Cost",
    table="job_costs",
    alias="jc",
    model=JobCost,
    select_columns="jc.*, p.name AS project_name",
    joins=(PROJECT_JOIN.format(alias="jc"),),
    sortable_fields=("id", "task", "estimated_cost", "actual_cost", "variance", "status", "created_at"),
    filterable_fields=("status", "project_id"),
    search_columns=("jc.job_code", "jc.task", "jc.resource", "p.name"),
    identifier_field="job_code",
    identifier_prefix="JC",
    stats_counts={"status": _values(JobCostStatus)},
    stats_sums=("estimated_cost", "actual_cost", "variance"),
    prepare=with_cost_totals,
)

TASKS = ResourceConfig(
    name="tasks",
    label="Task",
    table="tasks",
    alias="t",
    model=Task,
    select_columns="t.*, p.name AS project_name, p.client AS project_client",
    joins=(PROJECT_JOIN.format(alias="t"),),
    sortable_fields=("id", "title", "start_date", "due_date", "priority", "status", "progress", "created_at"),
    filterable_fields=("status", "priority", "project_id", "assignee_id"),
    search_columns=("t.title", "t.description", "p.name"),
    identifier_field="task_code",
    identifier_prefix="TSK",
    stats_counts={"status": _values(TaskStatus), "priority": _values(TaskPriority)},
    stats_averages=("progress",),
)

CONTRACTS = ResourceConfig(
    name="contracts",
    label="Contract",
    table="contracts",
    alias="c",
    model=Contract,
    select_columns="c.*, p.name AS project_name",
    joins=(PROJECT_JOIN.format(alias="c"),),
    sortable_fields=("id", "client", "value", "signed_date", "start_date", "end_date", "status", "created_at"),
    filterable_fields=("status", "project_id"),
    search_columns=("c.client", "c.manager", "p.name"),
    identifier_field="contract_code",
    identifier_prefix="CON",
    stats_counts={"status": _values(ContractStatus)},
    stats_sums=("value",),
)

RFQS = ResourceConfig(
    name="rfqs",
    label="RFQ",
    table="rfqs",
    alias="q",
    model=Rfq,
    sortable_fields=("id", "client", "date", "value", "deadline", "status", "created_at"),
    filterable_fields=("status",),
    search_columns=("q.client", "q.project", "q.location"),
    identifier_field="rfq_code",
    identifier_prefix="RFQ",
    stats_counts={"status": _values(RfqStatus)},
    stats_sums=("value",),
)

MATERIALS = ResourceConfig(
    name="materials",
    label="Material",
    table="materials",
    alias="mt",
    model=Material,
    select_columns="mt.*, p.name AS project_name",
    joins=(PROJECT_JOIN.format(alias="mt"),),
    sortable_fields=("id", "name", "supplier", "planned_date", "actual_date", "total_cost", "status", "created_at"),
    filterable_fields=("status", "project_id", "supplier"),
    search_columns=("mt.name", "mt.supplier", "mt.po_no", "p.name"),
    identifier_field="material_code",
    identifier_prefix="MAT",
    stats_counts={"status": _values(MaterialStatus)},
    stats_sums=("total_cost",),
    prepare=with_material_total,
)

INSPECTIONS = ResourceConfig(
    name="inspections",
    label="Inspection",
    table="quality_inspections",
    alias="qi",
    model=Inspection,
    select_columns="qi.*, t.title AS task_title",
    joins=("LEFT JOIN tasks t ON qi.task_id = t.id",),
    sortable_fields=("id", "date", "inspector", "status", "hse_issues", "severity", "created_at"),
    filterable_fields=("status", "hse_issues", "severity", "task_id"),
    search_columns=("qi.inspection_code", "qi.inspector", "qi.snags", "t.title"),
    identifier_field="inspection_code",
    identifier_prefix="INSP",
    stats_counts={"status": _values(InspectionStatus), "hse_issues": _values(HseLevel)},
)

# No business identifier: resources are referenced by name
WORKFORCE = ResourceConfig(
    name="resources",
    label="Resource",
    table="resources",
    alias="rs",
    model=Resource,
    sortable_fields=("id", "name", "role", "rate", "availability", "assigned_tasks", "created_at"),
    filterable_fields=("role", "availability"),
    search_columns=("rs.name", "rs.role", "rs.subcontractor"),
    stats_counts={"availability": _values(Availability)},
    stats_sums=("assigned_tasks",),
    stats_averages=("assigned_tasks", "rate"),
)

INVOICES = ResourceConfig(
    name="invoices",
    label="Invoice",
    table="invoices",
    alias="i",
    select_columns="i.*, p.name AS project_name",
    joins=(PROJECT_JOIN.format(alias="i"),),
    sortable_fields=("id", "invoice_number", "date", "due_date", "amount", "status", "created_at"),
    filterable_fields=("status", "project_id"),
    search_columns=("i.invoice_number", "p.name", "i.client"),
    identifier_field="invoice_number",
    identifier_prefix="INV",
    identifier_with_year=True,
    stats_counts={"status": _values(InvoiceStatus)},
    stats_sums=("amount",),
)

PAYMENTS = ResourceConfig(
    name="payments",
    label="Payment",
    table="payments",
    alias="pay",
    select_columns="pay.*, i.invoice_number AS invoice_number, i.client AS client",
    joins=("LEFT JOIN invoices i ON pay.invoice_id = i.id",),
    sortable_fields=("id", "date", "amount", "method", "created_at"),
    filterable_fields=("method", "invoice_id"),
    search_columns=("pay.reference", "i.invoice_number"),
    identifier_field="payment_id",
    identifier_prefix="PAY",
    identifier_with_year=True,
    stats_counts={"method": _values(PaymentMethod)},
    stats_sums=("amount",),
)

RESOURCES = {
    config.name: config
    for config in (
        PROJECTS, MILESTONES, RISKS, JOB_COSTS, TASKS, CONTRACTS, RFQS,
        MATERIALS, INSPECTIONS, WORKFORCE, INVOICES, PAYMENTS,
    )
}

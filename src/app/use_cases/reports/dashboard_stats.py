"""DashboardStats Use Case

Headline figures across the portfolio, scoped to what the caller's role is
allowed to see.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, FrozenSet, Mapping, Tuple
from libs.result import Result, Return
from src.app.errors import retrieval_failed
from src.app.services.access_control import Role
from src.app.services.sql_executor import SqlExecutor
from src.domain.contract import ContractStatus
from src.domain.inspection import InspectionStatus
from src.domain.invoice import InvoiceStatus
from src.domain.project import ProjectStatus
from src.domain.rfq import RfqStatus
from src.domain.task import TaskStatus

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class DashboardSection:
    name: str
    sql: str
    params: Mapping[str, Any]
    roles: FrozenSet[Role]
    decimal_fields: Tuple[str, ...] = ()


ALL_ROLES = frozenset(Role)

SECTIONS = (
    DashboardSection(
        name="projects",
        sql="""
            SELECT
                COUNT(*) AS total_projects,
                COALESCE(SUM(CASE WHEN status = :active THEN 1 ELSE 0 END), 0) AS active_projects,
                COALESCE(SUM(CASE WHEN status = :completed THEN 1 ELSE 0 END), 0) AS completed_projects,
                COALESCE(SUM(CASE WHEN status = :on_hold THEN 1 ELSE 0 END), 0) AS on_hold_projects
            FROM projects
        """,
        params={
            "active": ProjectStatus.IN_PROGRESS.value,
            "completed": ProjectStatus.COMPLETED.value,
            "on_hold": ProjectStatus.ON_HOLD.value,
        },
        roles=ALL_ROLES,
    ),
    DashboardSection(
        name="tasks",
        sql="""
            SELECT
                COUNT(*) AS total_tasks,
                COALESCE(SUM(CASE WHEN status = :in_progress THEN 1 ELSE 0 END), 0) AS in_progress_tasks,
                COALESCE(SUM(CASE WHEN status = :completed THEN 1 ELSE 0 END), 0) AS completed_tasks,
                COALESCE(AVG(progress), 0) AS average_progress
            FROM tasks
        """,
        params={
            "in_progress": TaskStatus.IN_PROGRESS.value,
            "completed": TaskStatus.COMPLETED.value,
        },
        roles=ALL_ROLES,
        decimal_fields=("average_progress",),
    ),
    DashboardSection(
        name="rfqs",
        sql="""
            SELECT
                COUNT(*) AS total_rfqs,
                COALESCE(SUM(CASE WHEN status = :submitted THEN 1 ELSE 0 END), 0) AS pending_rfqs,
                COALESCE(SUM(CASE WHEN status = :won THEN 1 ELSE 0 END), 0) AS won_rfqs
            FROM rfqs
        """,
        params={"submitted": RfqStatus.SUBMITTED.value, "won": RfqStatus.WON.value},
        roles=frozenset({Role.ADMIN, Role.PROJECT_MANAGER}),
    ),
    DashboardSection(
        name="contracts",
        sql="""
            SELECT
                COUNT(*) AS total_contracts,
                COALESCE(SUM(CASE WHEN status = :active THEN 1 ELSE 0 END), 0) AS active_contracts
            FROM contracts
        """,
        params={"active": ContractStatus.ACTIVE.value},
        roles=frozenset({Role.ADMIN, Role.PROJECT_MANAGER}),
    ),
    DashboardSection(
        name="financials",
        sql="""
            SELECT
                COALESCE(SUM(amount), 0) AS total_invoices,
                COALESCE(SUM(CASE WHEN status = :pending THEN amount ELSE 0 END), 0) AS invoices_due
            FROM invoices
        """,
        params={"pending": InvoiceStatus.PENDING.value},
        roles=frozenset({Role.ADMIN, Role.FINANCE}),
        decimal_fields=("total_invoices", "invoices_due"),
    ),
    DashboardSection(
        name="quality",
        sql="""
            SELECT
                COUNT(*) AS total_inspections,
                COALESCE(SUM(CASE WHEN status = :open THEN 1 ELSE 0 END), 0) AS open_issues
            FROM quality_inspections
        """,
        params={"open": InspectionStatus.OPEN.value},
        roles=frozenset({Role.ADMIN, Role.QUALITY}),
    ),
)


def _section_values(section: DashboardSection, row: Mapping[str, Any]) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key, raw in row.items():
        if key in section.decimal_fields:
            value = Decimal(str(raw or 0))
            data[key] = value.quantize(TWO_PLACES) if key.startswith("average") else value
        else:
            data[key] = int(raw or 0)
    return data


class DashboardStats:
    """
    Use Case: Dashboard statistics

    Projects and tasks are visible to every role. RFQs and contracts are
    added for Admin and ProjectManager, financials for Admin and Finance,
    quality for Admin and Quality. Sections outside the role are not queried.
    """

    def __init__(self, executor: SqlExecutor):
        self.executor = executor

    async def execute(self, role: Role) -> Result[Dict[str, Any]]:
        stats: Dict[str, Any] = {}
        try:
            for section in SECTIONS:
                if role not in section.roles:
                    continue
                rows = await self.executor.execute(section.sql, dict(section.params))
                stats[section.name] = _section_values(section, rows[0] if rows else {})
        except Exception as e:
            logger.error(f"Get dashboard stats error: {e}")
            return Return.err(
                retrieval_failed(
                    code="DASHBOARD_STATS_FAILED",
                    message="Failed to retrieve dashboard statistics",
                    exc=e,
                )
            )
        return Return.ok(stats)

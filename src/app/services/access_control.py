"""Role-based capability check

Static role -> capability table consulted before every create, update and
delete. Token verification happens upstream; this only answers allow/deny.
"""

from enum import Enum
from typing import Dict, Optional, Set


class Role(str, Enum):
    ADMIN = "Admin"
    PROJECT_MANAGER = "ProjectManager"
    DESIGNER = "Designer"
    PROCUREMENT_OFFICER = "ProcurementOfficer"
    FINANCE = "Finance"
    QUALITY = "Quality"
    CLIENT = "Client"


class Action(str, Enum):
    """Capabilities follow the pattern <resource>:<verb>"""

    PROJECT_CREATE = "projects:create"
    PROJECT_UPDATE = "projects:update"
    PROJECT_DELETE = "projects:delete"

    MILESTONE_CREATE = "milestones:create"
    MILESTONE_UPDATE = "milestones:update"
    MILESTONE_DELETE = "milestones:delete"

    RISK_CREATE = "risks:create"
    RISK_UPDATE = "risks:update"
    RISK_DELETE = "risks:delete"

    JOB_COST_CREATE = "job_costs:create"
    JOB_COST_UPDATE = "job_costs:update"
    JOB_COST_DELETE = "job_costs:delete"

    TASK_CREATE = "tasks:create"
    TASK_UPDATE = "tasks:update"
    TASK_DELETE = "tasks:delete"

    CONTRACT_CREATE = "contracts:create"
    CONTRACT_UPDATE = "contracts:update"
    CONTRACT_DELETE = "contracts:delete"

    RFQ_CREATE = "rfqs:create"
    RFQ_UPDATE = "rfqs:update"
    RFQ_DELETE = "rfqs:delete"

    MATERIAL_CREATE = "materials:create"
    MATERIAL_UPDATE = "materials:update"
    MATERIAL_DELETE = "materials:delete"

    INSPECTION_CREATE = "inspections:create"
    INSPECTION_UPDATE = "inspections:update"
    INSPECTION_DELETE = "inspections:delete"

    RESOURCE_CREATE = "resources:create"
    RESOURCE_UPDATE = "resources:update"
    RESOURCE_DELETE = "resources:delete"

    INVOICE_CREATE = "invoices:create"
    INVOICE_UPDATE = "invoices:update"
    INVOICE_DELETE = "invoices:delete"

    PAYMENT_CREATE = "payments:create"


_MANAGERS = {Role.ADMIN, Role.PROJECT_MANAGER}
_FINANCE_WRITERS = {Role.ADMIN, Role.PROJECT_MANAGER, Role.FINANCE}
_PROCUREMENT_WRITERS = {Role.ADMIN, Role.PROJECT_MANAGER, Role.PROCUREMENT_OFFICER}
_QUALITY_WRITERS = {Role.ADMIN, Role.PROJECT_MANAGER, Role.QUALITY}
# any signed-in user may update a task; assignee checks happen upstream
_EVERYONE = set(Role)

ACTION_ROLES: Dict[Action, Set[Role]] = {
    Action.PROJECT_CREATE: _MANAGERS,
    Action.PROJECT_UPDATE: _MANAGERS,
    Action.PROJECT_DELETE: {Role.ADMIN},
    Action.MILESTONE_CREATE: _MANAGERS,
    Action.MILESTONE_UPDATE: _MANAGERS,
    Action.MILESTONE_DELETE: _MANAGERS,
    Action.RISK_CREATE: _MANAGERS,
    Action.RISK_UPDATE: _MANAGERS,
    Action.RISK_DELETE: _MANAGERS,
    Action.JOB_COST_CREATE: _FINANCE_WRITERS,
    Action.JOB_COST_UPDATE: _FINANCE_WRITERS,
    Action.JOB_COST_DELETE: {Role.ADMIN, Role.FINANCE},
    Action.TASK_CREATE: _MANAGERS,
    Action.TASK_UPDATE: _EVERYONE,
    Action.TASK_DELETE: _MANAGERS,
    Action.CONTRACT_CREATE: _MANAGERS,
    Action.CONTRACT_UPDATE: _MANAGERS,
    Action.CONTRACT_DELETE: {Role.ADMIN},
    Action.RFQ_CREATE: _MANAGERS,
    Action.RFQ_UPDATE: _MANAGERS,
    Action.RFQ_DELETE: {Role.ADMIN},
    Action.MATERIAL_CREATE: _PROCUREMENT_WRITERS,
    Action.MATERIAL_UPDATE: _PROCUREMENT_WRITERS,
    Action.MATERIAL_DELETE: {Role.ADMIN, Role.PROCUREMENT_OFFICER},
    Action.INSPECTION_CREATE: _QUALITY_WRITERS,
    Action.INSPECTION_UPDATE: _QUALITY_WRITERS,
    Action.INSPECTION_DELETE: {Role.ADMIN, Role.QUALITY},
    Action.RESOURCE_CREATE: _MANAGERS,
    Action.RESOURCE_UPDATE: _MANAGERS,
    Action.RESOURCE_DELETE: {Role.ADMIN},
    Action.INVOICE_CREATE: _FINANCE_WRITERS,
    Action.INVOICE_UPDATE: _FINANCE_WRITERS,
    Action.INVOICE_DELETE: {Role.ADMIN, Role.FINANCE},
    Action.PAYMENT_CREATE: _FINANCE_WRITERS,
}


def parse_role(value: Optional[str]) -> Optional[Role]:
    if not value:
        return None
    try:
        return Role(value.strip())
    except ValueError:
        return None


def can_perform(role: Optional[Role], action: Action) -> bool:
    """
    Check if a role may perform an action

    Args:
        role: Caller's role (None when unknown)
        action: Capability being exercised

    Returns:
        True if allowed, False otherwise
    """
    if role is None:
        return False
    return role in ACTION_ROLES.get(action, set())

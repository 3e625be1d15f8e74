from .unit_of_work import UnitOfWork
from .sql_executor import SqlExecutor
from .identifier_generator import EntityIdentifierGenerator, format_identifier
from .access_control import Action, Role, can_perform, parse_role

__all__ = [
    "UnitOfWork",
    "SqlExecutor",
    "EntityIdentifierGenerator",
    "format_identifier",
    "Action",
    "Role",
    "can_perform",
    "parse_role",
]

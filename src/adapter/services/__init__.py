from .unit_of_work import SqlAlchemyUnitOfWork
from .sql_executor import SqlAlchemySqlExecutor

__all__ = [
    "SqlAlchemyUnitOfWork",
    "SqlAlchemySqlExecutor",
]

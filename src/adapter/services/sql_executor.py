"""SQLAlchemy SQL Executor Implementation

Runs parameterized SQL text on the request's AsyncSession, so raw list
queries and ORM writes share one connection and one transaction.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.sql_executor import SqlExecutor


class SqlAlchemySqlExecutor(SqlExecutor):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute(
        self, sql: str, params: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        result = await self.session.execute(text(sql), dict(params or {}))
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]

    async def scalar(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        result = await self.session.execute(text(sql), dict(params or {}))
        return result.scalar()

"""SQL Executor Interface

Runs parameterized SQL text against the store. Placeholders are named
(:name); values are always passed separately from the statement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional


class SqlExecutor(ABC):
    @abstractmethod
    async def execute(
        self, sql: str, params: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Run a statement and return its rows

        Args:
            sql: Statement with named placeholders
            params: Bound values keyed by placeholder name

        Returns:
            Rows as column -> value mappings (empty for statements without rows)
        """
        pass

    @abstractmethod
    async def scalar(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Run a statement and return the first column of the first row, or None"""
        pass

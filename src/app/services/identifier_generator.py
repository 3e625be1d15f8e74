"""Business identifier generation

Human-readable sequential codes such as RISK-004 or INV-2024-007, derived
from the current maximum numeric row id.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Callable, Optional

from src.app.services.sql_executor import SqlExecutor

logger = logging.getLogger(__name__)

IDENTIFIER_WIDTH = 3
_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def format_identifier(prefix: str, sequence: int, year: Optional[int] = None) -> str:
    """
    Format a business identifier

    Examples:
        format_identifier("RISK", 42)        -> "RISK-042"
        format_identifier("INV", 7, 2024)    -> "INV-2024-007"
    """
    number = str(sequence).zfill(IDENTIFIER_WIDTH)
    if year is not None:
        return f"{prefix}-{year}-{number}"
    return f"{prefix}-{number}"


class EntityIdentifierGenerator:
    """
    Generates the next business identifier for a table

    Reads MAX(id) (0 for an empty table) and adds one. The read and the
    following insert are not atomic; callers rely on the UNIQUE constraint on
    the identifier column to reject a concurrent duplicate.
    """

    def __init__(
        self,
        executor: SqlExecutor,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.executor = executor
        self.clock = clock

    async def next_sequence(self, table: str) -> int:
        if not _TABLE_NAME.match(table):
            raise ValueError(f"Invalid table name: {table!r}")
        max_id = await self.executor.scalar(f"SELECT COALESCE(MAX(id), 0) FROM {table}")
        return int(max_id or 0) + 1

    async def next_identifier(self, table: str, prefix: str, with_year: bool = False) -> str:
        sequence = await self.next_sequence(table)
        year = self.clock().year if with_year else None
        identifier = format_identifier(prefix, sequence, year)
        logger.debug(f"Generated identifier {identifier} for {table}")
        return identifier

"""ResourceStats Use Case

Aggregate statistics for a resource: total rows, per-value counts of
status-like columns, sums and averages of numeric columns.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Tuple
from libs.result import Result, Return
from src.app.errors import error_code, retrieval_failed
from src.app.query.resource import ResourceConfig
from src.app.services.sql_executor import SqlExecutor

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def build_stats_query(resource: ResourceConfig) -> Tuple[str, Dict[str, Any], List[Tuple[str, str, str]]]:
    """
    Build the single aggregate query behind ResourceStats

    Returns:
        (sql, params, layout) where layout lists (column alias, group, key)
        so the flat result row can be folded back into nested groups
    """
    selects = ["COUNT(*) AS total"]
    params: Dict[str, Any] = {}
    layout: List[Tuple[str, str, str]] = []

    for column, values in resource.stats_counts.items():
        for value in values:
            alias = f"c{len(layout)}"
            param = f"s{len(params)}"
            selects.append(f"SUM(CASE WHEN {column} = :{param} THEN 1 ELSE 0 END) AS {alias}")
            params[param] = value
            layout.append((alias, f"by_{column}", value))

    for column in resource.stats_sums:
        alias = f"c{len(layout)}"
        selects.append(f"COALESCE(SUM({column}), 0) AS {alias}")
        layout.append((alias, "totals", column))

    for column in resource.stats_averages:
        alias = f"c{len(layout)}"
        selects.append(f"AVG({column}) AS {alias}")
        layout.append((alias, "averages", column))

    sql = f"SELECT {', '.join(selects)} FROM {resource.table}"
    return sql, params, layout


class ResourceStats:
    def __init__(self, executor: SqlExecutor):
        self.executor = executor

    async def execute(self, resource: ResourceConfig) -> Result[Dict[str, Any]]:
        sql, params, layout = build_stats_query(resource)
        try:
            rows = await self.executor.execute(sql, params)
        except Exception as e:
            logger.error(f"Get {resource.noun} stats error: {e}")
            return Return.err(
                retrieval_failed(
                    code=error_code(resource.label, "STATS_FAILED"),
                    message=f"Failed to retrieve {resource.noun} statistics",
                    exc=e,
                )
            )

        row = rows[0] if rows else {}
        stats: Dict[str, Any] = {"total": int(row.get("total") or 0)}
        for alias, group, key in layout:
            raw = row.get(alias) or 0
            if group == "averages":
                value = Decimal(str(raw)).quantize(TWO_PLACES)
            elif group == "totals":
                value = Decimal(str(raw))
            else:
                value = int(raw)
            stats.setdefault(group, {})[key] = value
        return Return.ok(stats)

"""Unit tests for ResourceStats"""

import pytest
from decimal import Decimal

from src.app.resources import JOB_COSTS, RISKS, TASKS, WORKFORCE
from src.app.use_cases.resources import ResourceStats, build_stats_query


class TestBuildStatsQuery:
    def test_counts_use_bound_values(self):
        sql, params, layout = build_stats_query(RISKS)

        assert sql.startswith("SELECT COUNT(*) AS total, ")
        assert sql.endswith("FROM risks")
        assert "'High'" not in sql
        assert sql.count(":s") == len(params)
        assert ("c0", "by_level", "Low") in layout

    def test_sums_are_coalesced(self):
        sql, params, layout = build_stats_query(JOB_COSTS)

        assert "COALESCE(SUM(variance), 0)" in sql
        assert layout[-1][1:] == ("totals", "variance")


@pytest.mark.asyncio
class TestResourceStats:
    async def test_folds_row_into_groups(self, mock_executor):
        # Arrange
        _, _, layout = build_stats_query(JOB_COSTS)
        row = {"total": 3}
        for alias, group, key in layout:
            row[alias] = 1 if group != "totals" else "150.50"
        mock_executor.execute.return_value = [row]

        # Act
        result = await ResourceStats(mock_executor).execute(JOB_COSTS)

        # Assert
        assert result.is_ok()
        stats = result.value
        assert stats["total"] == 3
        assert stats["by_status"] == {"Estimated": 1, "In Progress": 1, "Completed": 1}
        assert stats["totals"]["actual_cost"] == Decimal("150.50")

    async def test_store_error(self, mock_executor):
        mock_executor.execute.side_effect = RuntimeError("timeout")

        result = await ResourceStats(mock_executor).execute(RISKS)

        assert result.error.code == "RISK_STATS_FAILED"


class TestAverages:
    def test_averages_follow_sums(self):
        sql, _, layout = build_stats_query(WORKFORCE)

        assert "COALESCE(SUM(assigned_tasks), 0)" in sql
        assert "AVG(rate)" in sql
        assert [entry[1:] for entry in layout[-2:]] == [
            ("averages", "assigned_tasks"),
            ("averages", "rate"),
        ]

    @pytest.mark.asyncio
    async def test_average_rounded_and_empty_table_is_zero(self, mock_executor):
        # Arrange
        _, _, layout = build_stats_query(TASKS)
        row = {"total": 3}
        for alias, group, key in layout:
            row[alias] = 33.333333 if group == "averages" else 1
        mock_executor.execute.return_value = [row]

        # Act
        result = await ResourceStats(mock_executor).execute(TASKS)

        # Assert
        assert result.value["averages"] == {"progress": Decimal("33.33")}

    @pytest.mark.asyncio
    async def test_null_average_on_empty_table(self, mock_executor):
        _, _, layout = build_stats_query(TASKS)
        row = {"total": 0, **{alias: None for alias, _, _ in layout}}
        mock_executor.execute.return_value = [row]

        result = await ResourceStats(mock_executor).execute(TASKS)

        assert result.value["averages"]["progress"] == Decimal("0.00")
        assert result.value["by_status"]["On Hold"] == 0

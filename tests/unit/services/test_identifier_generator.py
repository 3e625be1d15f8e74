"""Unit tests for EntityIdentifierGenerator"""

import pytest
from datetime import datetime

from src.app.services.identifier_generator import EntityIdentifierGenerator, format_identifier


class TestFormatIdentifier:
    def test_pads_to_three_digits(self):
        assert format_identifier("RISK", 4) == "RISK-004"

    def test_with_year(self):
        assert format_identifier("INV", 7, 2024) == "INV-2024-007"

    def test_wider_numbers_are_not_truncated(self):
        assert format_identifier("JC", 1234) == "JC-1234"


@pytest.mark.asyncio
class TestEntityIdentifierGenerator:
    async def test_empty_table_starts_at_001(self, mock_executor):
        # Arrange
        mock_executor.scalar.return_value = 0
        generator = EntityIdentifierGenerator(mock_executor)

        # Act
        identifier = await generator.next_identifier("risks", "RISK")

        # Assert
        assert identifier == "RISK-001"

    async def test_next_after_max_id(self, mock_executor):
        mock_executor.scalar.return_value = 41
        generator = EntityIdentifierGenerator(mock_executor)

        assert await generator.next_identifier("job_costs", "JC") == "JC-042"

    async def test_year_comes_from_clock(self, mock_executor):
        mock_executor.scalar.return_value = 6
        generator = EntityIdentifierGenerator(mock_executor, clock=lambda: datetime(2024, 5, 1))

        assert await generator.next_identifier("invoices", "INV", with_year=True) == "INV-2024-007"

    async def test_null_max_treated_as_empty(self, mock_executor):
        mock_executor.scalar.return_value = None
        generator = EntityIdentifierGenerator(mock_executor)

        assert await generator.next_sequence("payments") == 1

    async def test_reads_max_id_of_table(self, mock_executor):
        await EntityIdentifierGenerator(mock_executor).next_sequence("milestones")

        sql = mock_executor.scalar.await_args.args[0]
        assert sql == "SELECT COALESCE(MAX(id), 0) FROM milestones"

    async def test_rejects_unsafe_table_name(self, mock_executor):
        generator = EntityIdentifierGenerator(mock_executor)

        with pytest.raises(ValueError):
            await generator.next_sequence("risks; DROP TABLE risks")

        mock_executor.scalar.assert_not_awaited()

"""Unit tests for CreateInvoice use case

Tests cover:
- amount derived from line items
- invoice number generation
- rollback when any write fails
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from datetime import date, datetime, timezone

from src.app.errors import ErrorKind
from src.app.use_cases.financial.create_invoice import CreateInvoice
from src.app.use_cases.financial.dtos import CreateInvoiceCommandDTO
from src.domain.invoice import InvoiceStatus


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()

    async def create(invoice):
        invoice.id = 1
        invoice.created_at = datetime.now(timezone.utc)
        invoice.updated_at = datetime.now(timezone.utc)
        return invoice

    repo.create = AsyncMock(side_effect=create)
    return repo


@pytest.fixture
def mock_invoice_line_repo():
    repo = MagicMock()
    created = []

    async def create(line):
        line.id = len(created) + 1
        created.append(line)
        return line

    repo.create = AsyncMock(side_effect=create)
    repo.created = created
    return repo


@pytest.fixture
def mock_id_generator():
    generator = MagicMock()
    generator.next_identifier = AsyncMock(return_value="INV-2024-001")
    return generator


@pytest.fixture
def create_invoice_use_case(mock_uow, mock_invoice_repo, mock_invoice_line_repo, mock_id_generator):
    return CreateInvoice(
        uow=mock_uow,
        invoice_repo=mock_invoice_repo,
        invoice_line_repo=mock_invoice_line_repo,
        id_generator=mock_id_generator,
    )


@pytest.fixture
def sample_command():
    return CreateInvoiceCommandDTO(
        project_id=1,
        client="Acme Holdings",
        date=date(2024, 3, 1),
        due_date=date(2024, 3, 31),
        items=[
            {"description": "Site survey", "quantity": "2", "rate": "50.00"},
            {"description": "Report", "quantity": "1", "rate": "30.00"},
        ],
    )


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:
    async def test_create_invoice_success(
        self,
        create_invoice_use_case,
        mock_invoice_repo,
        mock_invoice_line_repo,
        mock_id_generator,
        mock_uow,
        sample_command,
    ):
        """
        Given: Two items (2 x 50, 1 x 30)
        When: CreateInvoice is executed
        Then: Invoice amount is 130, two lines are stored, status is Pending
        """
        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.invoice_number == "INV-2024-001"
        assert response.amount == Decimal("130.00")
        assert response.status == InvoiceStatus.PENDING.value
        assert [item.amount for item in response.items] == [Decimal("100.00"), Decimal("30.00")]

        mock_id_generator.next_identifier.assert_awaited_once_with("invoices", "INV", with_year=True)
        mock_invoice_repo.create.assert_awaited_once()
        assert mock_invoice_line_repo.create.await_count == 2
        assert all(line.invoice_id == 1 for line in mock_invoice_line_repo.created)
        mock_uow.commit.assert_awaited_once()
        mock_uow.rollback.assert_not_awaited()


@pytest.mark.asyncio
class TestCreateInvoiceFailure:
    async def test_line_insert_failure_rolls_back(
        self, create_invoice_use_case, mock_invoice_line_repo, mock_uow, sample_command
    ):
        """A failure after the header insert rolls back and reports one error"""
        # Arrange
        mock_invoice_line_repo.create = AsyncMock(side_effect=RuntimeError("disk full"))

        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "CREATE_INVOICE_FAILED"
        assert result.error.message == "Failed to create invoice"
        assert result.error.kind == ErrorKind.TRANSACTION
        assert "disk full" in result.error.reason
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_awaited()

    async def test_identifier_failure_writes_nothing(
        self, create_invoice_use_case, mock_id_generator, mock_invoice_repo, mock_uow, sample_command
    ):
        mock_id_generator.next_identifier = AsyncMock(side_effect=RuntimeError("db down"))

        result = await create_invoice_use_case.execute(sample_command)

        assert result.is_err()
        mock_invoice_repo.create.assert_not_awaited()
        mock_uow.rollback.assert_awaited_once()


class TestCreateInvoiceCommandValidation:
    def test_requires_at_least_one_item(self):
        with pytest.raises(ValueError):
            CreateInvoiceCommandDTO(
                project_id=1,
                client="Acme Holdings",
                date=date(2024, 3, 1),
                due_date=date(2024, 3, 31),
                items=[],
            )

    def test_due_date_must_follow_date(self):
        with pytest.raises(ValueError):
            CreateInvoiceCommandDTO(
                project_id=1,
                client="Acme Holdings",
                date=date(2024, 3, 1),
                due_date=date(2024, 3, 1),
                items=[{"description": "Survey", "quantity": "1", "rate": "10"}],
            )

    def test_rejects_non_positive_quantity(self):
        with pytest.raises(ValueError):
            CreateInvoiceCommandDTO(
                project_id=1,
                client="Acme Holdings",
                date=date(2024, 3, 1),
                due_date=date(2024, 3, 31),
                items=[{"description": "Survey", "quantity": "0", "rate": "10"}],
            )

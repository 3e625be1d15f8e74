"""Integration tests for invoice and payment workflows

Runs the use cases against a real (in-memory SQLite) database to check what
is actually persisted, including after injected failures.
"""

import pytest
from datetime import date
from decimal import Decimal

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.invoice_line_repository import SqlAlchemyInvoiceLineRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.sql_executor import SqlAlchemySqlExecutor
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.identifier_generator import EntityIdentifierGenerator
from src.app.use_cases.financial import CreateInvoice, DeleteInvoice, RecordPayment, UpdateInvoice
from src.app.use_cases.financial.dtos import (
    CreateInvoiceCommandDTO,
    RecordPaymentCommandDTO,
    UpdateInvoiceCommandDTO,
)
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine
from src.domain.payment import Payment
from tests.integration.factories import seed_project


class FailingInvoiceLineRepository(SqlAlchemyInvoiceLineRepository):
    """Fails on the nth line insert, after earlier writes are already flushed"""

    def __init__(self, session, fail_on=2):
        super().__init__(session)
        self.fail_on = fail_on
        self.calls = 0

    async def create(self, invoice_line):
        self.calls += 1
        if self.calls == self.fail_on:
            raise RuntimeError("injected line failure")
        return await super().create(invoice_line)


class FailingStatusInvoiceRepository(SqlAlchemyInvoiceRepository):
    """Fails the Paid status change, after the payment row is flushed"""

    async def update_status(self, invoice_id, status):
        raise RuntimeError("injected status failure")


class FailingDeleteInvoiceRepository(SqlAlchemyInvoiceRepository):
    """Fails the header delete, after lines and payments are deleted"""

    async def delete(self, invoice_id):
        raise RuntimeError("injected delete failure")


async def count_rows(session: AsyncSession, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


def invoice_command(project_id: int) -> CreateInvoiceCommandDTO:
    return CreateInvoiceCommandDTO(
        project_id=project_id,
        client="Acme Holdings",
        date=date(2024, 3, 1),
        due_date=date(2024, 3, 31),
        items=[
            {"description": "Site survey", "quantity": "2", "rate": "50.00"},
            {"description": "Report", "quantity": "1", "rate": "30.00"},
        ],
    )


def create_invoice_use_case(session, line_repo=None) -> CreateInvoice:
    return CreateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        line_repo or SqlAlchemyInvoiceLineRepository(session),
        EntityIdentifierGenerator(SqlAlchemySqlExecutor(session)),
    )


def record_payment_use_case(session, invoice_repo=None) -> RecordPayment:
    return RecordPayment(
        SqlAlchemyUnitOfWork(session),
        invoice_repo or SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentRepository(session),
        EntityIdentifierGenerator(SqlAlchemySqlExecutor(session)),
    )


def payment_command(invoice_id: int, amount: str) -> RecordPaymentCommandDTO:
    return RecordPaymentCommandDTO(invoice_id=invoice_id, amount=Decimal(amount), date=date(2024, 3, 10))


@pytest.mark.asyncio
class TestCreateInvoiceIntegration:
    async def test_end_to_end_invoice_creation(self, db_session: AsyncSession):
        """
        Given: Items 2 x 50 and 1 x 30
        When: The invoice is created
        Then: One header of 130 and two lines of 100 and 30 exist
        """
        # Arrange
        project = await seed_project(db_session)

        # Act
        result = await create_invoice_use_case(db_session).execute(invoice_command(project.id))

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.invoice_number.startswith("INV-")
        assert response.invoice_number.endswith("-001")

        invoice = await SqlAlchemyInvoiceRepository(db_session).get_by_id(response.invoice_id)
        assert invoice.amount == Decimal("130.00")
        assert invoice.status == InvoiceStatus.PENDING.value

        lines = await SqlAlchemyInvoiceLineRepository(db_session).get_by_invoice_id(invoice.id)
        assert sorted(line.amount for line in lines) == [Decimal("30.00"), Decimal("100.00")]

    async def test_second_invoice_gets_next_number(self, db_session: AsyncSession):
        project = await seed_project(db_session)
        await create_invoice_use_case(db_session).execute(invoice_command(project.id))

        result = await create_invoice_use_case(db_session).execute(invoice_command(project.id))

        assert result.value.invoice_number.endswith("-002")

    async def test_failure_after_header_leaves_nothing(self, db_session: AsyncSession):
        """A failure on the second line leaves zero invoices and zero lines"""
        # Arrange
        project = await seed_project(db_session)
        failing_repo = FailingInvoiceLineRepository(db_session)

        # Act
        result = await create_invoice_use_case(db_session, failing_repo).execute(
            invoice_command(project.id)
        )

        # Assert
        assert result.is_err()
        assert result.error.code == "CREATE_INVOICE_FAILED"
        assert await count_rows(db_session, Invoice) == 0
        assert await count_rows(db_session, InvoiceLine) == 0


@pytest.mark.asyncio
class TestUpdateAndDeleteInvoiceIntegration:
    async def test_update_replaces_lines(self, db_session: AsyncSession):
        project = await seed_project(db_session)
        created = await create_invoice_use_case(db_session).execute(invoice_command(project.id))
        invoice_id = created.value.invoice_id

        command = UpdateInvoiceCommandDTO(
            invoice_id=invoice_id,
            project_id=project.id,
            client="Acme Holdings",
            date=date(2024, 3, 1),
            due_date=date(2024, 4, 30),
            items=[{"description": "Final report", "quantity": "4", "rate": "12.50"}],
        )
        use_case = UpdateInvoice(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyInvoiceRepository(db_session),
            SqlAlchemyInvoiceLineRepository(db_session),
        )

        result = await use_case.execute(command)

        assert result.is_ok()
        assert result.value.amount == Decimal("50.00")
        lines = await SqlAlchemyInvoiceLineRepository(db_session).get_by_invoice_id(invoice_id)
        assert [line.description for line in lines] == ["Final report"]
        assert await count_rows(db_session, InvoiceLine) == 1

    async def test_delete_removes_lines_and_payments(self, db_session: AsyncSession):
        project = await seed_project(db_session)
        created = await create_invoice_use_case(db_session).execute(invoice_command(project.id))
        invoice_id = created.value.invoice_id
        await record_payment_use_case(db_session).execute(payment_command(invoice_id, "10.00"))

        use_case = DeleteInvoice(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyInvoiceRepository(db_session),
            SqlAlchemyInvoiceLineRepository(db_session),
            SqlAlchemyPaymentRepository(db_session),
        )
        result = await use_case.execute(invoice_id)

        assert result.is_ok()
        assert await count_rows(db_session, Invoice) == 0
        assert await count_rows(db_session, InvoiceLine) == 0
        assert await count_rows(db_session, Payment) == 0


@pytest.mark.asyncio
class TestRecordPaymentIntegration:
    async def test_two_payments_settle_invoice(self, db_session: AsyncSession):
        """
        Given: Invoice of 100
        When: Payments of 60 then 40 are recorded
        Then: Status is Pending after the first and Paid after the second
        """
        # Arrange
        project = await seed_project(db_session)
        created = await create_invoice_use_case(db_session).execute(
            CreateInvoiceCommandDTO(
                project_id=project.id,
                client="Acme Holdings",
                date=date(2024, 3, 1),
                due_date=date(2024, 3, 31),
                items=[{"description": "Retainer", "quantity": "1", "rate": "100.00"}],
            )
        )
        invoice_id = created.value.invoice_id

        # Act
        first = await record_payment_use_case(db_session).execute(payment_command(invoice_id, "60.00"))
        second = await record_payment_use_case(db_session).execute(payment_command(invoice_id, "40.00"))

        # Assert
        assert first.value.invoice_status == InvoiceStatus.PENDING.value
        assert first.value.payment_id.endswith("-001")
        assert second.value.invoice_status == InvoiceStatus.PAID.value
        assert second.value.total_paid == Decimal("100.00")

        invoice = await SqlAlchemyInvoiceRepository(db_session).get_by_id(invoice_id)
        await db_session.refresh(invoice)
        assert invoice.status == InvoiceStatus.PAID.value

    async def test_partial_payment_stays_pending(self, db_session: AsyncSession):
        project = await seed_project(db_session)
        created = await create_invoice_use_case(db_session).execute(invoice_command(project.id))

        result = await record_payment_use_case(db_session).execute(
            payment_command(created.value.invoice_id, "30.00")
        )

        assert result.value.invoice_status == InvoiceStatus.PENDING.value
        assert await count_rows(db_session, Payment) == 1

    async def test_unknown_invoice_writes_nothing(self, db_session: AsyncSession):
        result = await record_payment_use_case(db_session).execute(payment_command(999, "30.00"))

        assert result.error.code == "INVOICE_NOT_FOUND"
        assert await count_rows(db_session, Payment) == 0


@pytest.mark.asyncio
class TestWorkflowRollbackIntegration:
    async def test_update_failure_after_lines_deleted_keeps_original_invoice(
        self, db_session: AsyncSession
    ):
        """
        Given: An invoice of 130 with two lines
        When: The update fails inserting its first new line
        Then: Header and both original lines are unchanged
        """
        # Arrange
        project = await seed_project(db_session)
        created = await create_invoice_use_case(db_session).execute(invoice_command(project.id))
        invoice_id = created.value.invoice_id
        use_case = UpdateInvoice(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyInvoiceRepository(db_session),
            FailingInvoiceLineRepository(db_session, fail_on=1),
        )
        command = UpdateInvoiceCommandDTO(
            invoice_id=invoice_id,
            project_id=project.id,
            client="Renamed Client",
            date=date(2024, 3, 1),
            due_date=date(2024, 4, 30),
            items=[{"description": "Final report", "quantity": "4", "rate": "12.50"}],
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.error.code == "UPDATE_INVOICE_FAILED"
        invoice = await SqlAlchemyInvoiceRepository(db_session).get_by_id(invoice_id)
        await db_session.refresh(invoice)
        assert invoice.amount == Decimal("130.00")
        assert invoice.client == "Acme Holdings"
        assert invoice.due_date == date(2024, 3, 31)
        lines = await SqlAlchemyInvoiceLineRepository(db_session).get_by_invoice_id(invoice_id)
        assert sorted(line.description for line in lines) == ["Report", "Site survey"]

    async def test_payment_failure_after_insert_leaves_no_payment(self, db_session: AsyncSession):
        """
        Given: A pending invoice of 130
        When: A covering payment fails while marking the invoice Paid
        Then: No payment row exists and the invoice is still Pending
        """
        # Arrange
        project = await seed_project(db_session)
        created = await create_invoice_use_case(db_session).execute(invoice_command(project.id))
        invoice_id = created.value.invoice_id
        use_case = record_payment_use_case(
            db_session, invoice_repo=FailingStatusInvoiceRepository(db_session)
        )

        # Act
        result = await use_case.execute(payment_command(invoice_id, "130.00"))

        # Assert
        assert result.error.code == "RECORD_PAYMENT_FAILED"
        assert await count_rows(db_session, Payment) == 0
        invoice = await SqlAlchemyInvoiceRepository(db_session).get_by_id(invoice_id)
        await db_session.refresh(invoice)
        assert invoice.status == InvoiceStatus.PENDING.value

    async def test_delete_failure_before_header_keeps_lines_and_payments(
        self, db_session: AsyncSession
    ):
        """
        Given: An invoice with two lines and one payment
        When: Deleting fails on the header after dependents were deleted
        Then: The header, both lines and the payment are still stored
        """
        # Arrange
        project = await seed_project(db_session)
        created = await create_invoice_use_case(db_session).execute(invoice_command(project.id))
        invoice_id = created.value.invoice_id
        await record_payment_use_case(db_session).execute(payment_command(invoice_id, "10.00"))
        use_case = DeleteInvoice(
            SqlAlchemyUnitOfWork(db_session),
            FailingDeleteInvoiceRepository(db_session),
            SqlAlchemyInvoiceLineRepository(db_session),
            SqlAlchemyPaymentRepository(db_session),
        )

        # Act
        result = await use_case.execute(invoice_id)

        # Assert
        assert result.error.code == "DELETE_INVOICE_FAILED"
        assert await count_rows(db_session, Invoice) == 1
        assert await count_rows(db_session, InvoiceLine) == 2
        assert await count_rows(db_session, Payment) == 1

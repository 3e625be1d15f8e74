"""Integration tests for SqlAlchemyUnitOfWork"""

import pytest
from datetime import date
from decimal import Decimal

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.project import Project


def make_project() -> Project:
    return Project(
        project_code="PRJ-001",
        name="Harbour Office Fit-out",
        client="Acme Holdings",
        start_date=date(2024, 1, 15),
        end_date=date(2024, 9, 30),
        budget=Decimal("1000.00"),
    )


async def project_count(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(Project))
    return result.scalar_one()


@pytest.mark.asyncio
class TestSqlAlchemyUnitOfWork:
    async def test_commit_persists(self, db_session: AsyncSession):
        async with SqlAlchemyUnitOfWork(db_session) as uow:
            db_session.add(make_project())
            await uow.commit()

        assert await project_count(db_session) == 1

    async def test_uncommitted_work_is_discarded_on_exit(self, db_session: AsyncSession):
        async with SqlAlchemyUnitOfWork(db_session):
            db_session.add(make_project())
            await db_session.flush()

        assert await project_count(db_session) == 0

    async def test_rollback_discards_flushed_rows(self, db_session: AsyncSession):
        uow = SqlAlchemyUnitOfWork(db_session)
        db_session.add(make_project())
        await db_session.flush()

        await uow.rollback()

        assert await project_count(db_session) == 0

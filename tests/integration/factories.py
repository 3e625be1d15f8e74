"""Row builders shared by integration tests"""

from datetime import date
from decimal import Decimal

from src.domain.project import Project


async def seed_project(session, code="PRJ-001", name="Harbour Office Fit-out", client="Acme Holdings", **overrides):
    values = dict(
        project_code=code,
        name=name,
        client=client,
        start_date=date(2024, 1, 15),
        end_date=date(2024, 9, 30),
        budget=Decimal("250000.00"),
    )
    values.update(overrides)
    project = Project(**values)
    session.add(project)
    await session.commit()
    await session.refresh(project)
    return project

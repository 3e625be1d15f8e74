"""Unit tests for audit timestamp columns"""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import DateTime

from src.domain import (
    Contract,
    Inspection,
    Invoice,
    InvoiceLine,
    JobCost,
    Material,
    Milestone,
    Payment,
    Project,
    Resource,
    Rfq,
    Risk,
    Task,
)

TABLE_MODELS = [
    Project, Milestone, Risk, JobCost, Task, Contract, Rfq, Material, Inspection, Resource,
    Invoice, InvoiceLine, Payment,
]


@pytest.mark.parametrize("model", TABLE_MODELS, ids=lambda m: m.__tablename__)
def test_audit_columns_are_timezone_aware(model):
    for name in ("created_at", "updated_at"):
        if name not in model.__table__.columns:
            continue
        column_type = model.__table__.columns[name].type

        assert isinstance(column_type, DateTime)
        assert column_type.timezone is True


def test_new_entities_get_utc_timestamps():
    invoice = Invoice(
        invoice_number="INV-2024-001",
        project_id=1,
        client="Acme Holdings",
        date=date(2024, 3, 1),
        due_date=date(2024, 3, 31),
        amount=Decimal("130.00"),
    )

    assert invoice.created_at.utcoffset().total_seconds() == 0
    assert invoice.updated_at.utcoffset().total_seconds() == 0


def test_touch_refreshes_with_aware_timestamp():
    project = Project(
        project_code="PRJ-001",
        name="Harbour Office",
        client="Acme Holdings",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 6, 30),
        budget=Decimal("50000"),
    )
    before = project.updated_at

    project.touch()

    assert project.updated_at.tzinfo is not None
    assert project.updated_at >= before

"""Unit tests for the generic resource use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.errors import ErrorKind
from src.app.query.page import PageEnvelope
from src.app.resources import JOB_COSTS, RISKS
from src.app.use_cases.resources import (
    CreateResource,
    DeleteResource,
    GetResource,
    ListResources,
    UpdateResource,
)
from src.domain.job_cost import JobCost
from src.domain.risk import Risk


@pytest.fixture
def mock_repo():
    repo = MagicMock()

    async def create(entity):
        entity.id = 4
        return entity

    async def update(entity, values):
        for field, value in values.items():
            setattr(entity, field, value)
        return entity

    repo.create = AsyncMock(side_effect=create)
    repo.update = AsyncMock(side_effect=update)
    repo.delete = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_id_generator():
    generator = MagicMock()
    generator.next_identifier = AsyncMock(return_value="JC-004")
    return generator


@pytest.mark.asyncio
class TestListResources:
    async def test_returns_page(self):
        list_executor = MagicMock()
        list_executor.list = AsyncMock(return_value=PageEnvelope.build([{"id": 1}], 1, 10, 1))

        result = await ListResources(list_executor).execute(RISKS, {})

        assert result.is_ok()
        assert result.value.items == [{"id": 1}]

    async def test_store_error_maps_to_retrieve_failed(self):
        list_executor = MagicMock()
        list_executor.list = AsyncMock(side_effect=RuntimeError("no such table"))

        result = await ListResources(list_executor).execute(RISKS, {})

        assert result.is_err()
        assert result.error.code == "RISK_RETRIEVE_FAILED"
        assert result.error.message == "Failed to retrieve risks"
        assert result.error.kind == ErrorKind.STORE
        assert "no such table" not in result.error.message


@pytest.mark.asyncio
class TestGetResource:
    async def test_found(self, mock_executor):
        mock_executor.execute.return_value = [{"id": 3, "risk_code": "RISK-003"}]

        result = await GetResource(mock_executor).execute(RISKS, 3)

        assert result.value["risk_code"] == "RISK-003"
        sql, params = mock_executor.execute.await_args.args
        assert "WHERE r.id = :id" in sql
        assert params == {"id": 3}

    async def test_not_found(self, mock_executor):
        result = await GetResource(mock_executor).execute(RISKS, 3)

        assert result.error.code == "RISK_NOT_FOUND"
        assert result.error.message == "Risk not found"
        assert result.error.kind == ErrorKind.NOT_FOUND


@pytest.mark.asyncio
class TestCreateResource:
    async def test_job_cost_totals_are_derived(self, mock_uow, mock_repo, mock_id_generator):
        # Arrange
        values = {
            "task": "Foundations",
            "resource": "Crew A",
            "estimated_labor": Decimal("100"),
            "estimated_material": Decimal("50"),
            "overhead": Decimal("10"),
            "actual_labor": Decimal("120"),
            "actual_material": Decimal("45"),
            "actual_overhead": Decimal("5"),
        }

        # Act
        result = await CreateResource(mock_uow, mock_repo, mock_id_generator).execute(JOB_COSTS, values)

        # Assert
        assert result.is_ok()
        job_cost = result.value
        assert isinstance(job_cost, JobCost)
        assert job_cost.job_code == "JC-004"
        assert job_cost.estimated_cost == Decimal("160")
        assert job_cost.actual_cost == Decimal("170")
        assert job_cost.variance == Decimal("-10")
        mock_id_generator.next_identifier.assert_awaited_once_with("job_costs", "JC", with_year=False)
        mock_uow.commit.assert_awaited_once()

    async def test_failure_rolls_back(self, mock_uow, mock_repo, mock_id_generator):
        mock_repo.create = AsyncMock(side_effect=RuntimeError("unique constraint"))

        result = await CreateResource(mock_uow, mock_repo, mock_id_generator).execute(
            RISKS, {"project_id": 1, "description": "Flooding of site", "owner": "Site lead"}
        )

        assert result.error.code == "CREATE_RISK_FAILED"
        assert result.error.kind == ErrorKind.TRANSACTION
        mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
class TestUpdateResource:
    async def test_job_cost_totals_recomputed_from_merged_values(self, mock_uow, mock_repo):
        # Arrange
        existing = JobCost(
            id=4,
            job_code="JC-004",
            task="Foundations",
            resource="Crew A",
            estimated_labor=Decimal("100"),
            estimated_material=Decimal("50"),
            overhead=Decimal("10"),
            actual_labor=Decimal("0"),
            actual_material=Decimal("0"),
            actual_overhead=Decimal("0"),
        )
        mock_repo.get_by_id = AsyncMock(return_value=existing)

        # Act
        result = await UpdateResource(mock_uow, mock_repo).execute(
            JOB_COSTS, 4, {"actual_labor": Decimal("90")}
        )

        # Assert
        assert result.is_ok()
        changes = mock_repo.update.await_args.args[1]
        assert "id" not in changes
        assert "job_code" not in changes
        assert changes["estimated_cost"] == Decimal("160")
        assert changes["actual_cost"] == Decimal("90")
        assert changes["variance"] == Decimal("70")

    async def test_plain_update_passes_values_through(self, mock_uow, mock_repo):
        mock_repo.get_by_id = AsyncMock(
            return_value=Risk(id=2, risk_code="RISK-002", project_id=1, description="Late steel", owner="PM")
        )

        result = await UpdateResource(mock_uow, mock_repo).execute(RISKS, 2, {"status": "Mitigated"})

        assert result.value.status == "Mitigated"
        assert mock_repo.update.await_args.args[1] == {"status": "Mitigated"}

    async def test_not_found(self, mock_uow, mock_repo):
        result = await UpdateResource(mock_uow, mock_repo).execute(RISKS, 99, {"status": "Closed"})

        assert result.error.code == "RISK_NOT_FOUND"
        mock_repo.update.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
class TestDeleteResource:
    async def test_delete(self, mock_uow, mock_repo):
        entity = Risk(id=2, risk_code="RISK-002", project_id=1, description="Late steel", owner="PM")
        mock_repo.get_by_id = AsyncMock(return_value=entity)

        result = await DeleteResource(mock_uow, mock_repo).execute(RISKS, 2)

        assert result.is_ok()
        mock_repo.delete.assert_awaited_once_with(entity)
        mock_uow.commit.assert_awaited_once()

    async def test_not_found(self, mock_uow, mock_repo):
        result = await DeleteResource(mock_uow, mock_repo).execute(JOB_COSTS, 99)

        assert result.error.code == "JOB_COST_NOT_FOUND"
        assert result.error.message == "Job cost not found"
        mock_repo.delete.assert_not_awaited()

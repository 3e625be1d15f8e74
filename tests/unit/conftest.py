from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.unit_of_work import UnitOfWork


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with async commit/rollback"""
    uow = MagicMock(spec=UnitOfWork)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_executor():
    """Mock SqlExecutor; set execute/scalar return values per test"""
    executor = MagicMock()
    executor.execute = AsyncMock(return_value=[])
    executor.scalar = AsyncMock(return_value=0)
    return executor

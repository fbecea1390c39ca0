import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work with async commit/rollback"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    return MagicMock()


@pytest.fixture
def mock_view_cache():
    """Mock view cache"""
    return MagicMock()

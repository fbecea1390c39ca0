"""Unit tests for DeleteInvoice use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.invoices.delete_invoice import DeleteInvoice


@pytest.fixture
def delete_invoice_use_case(mock_uow, mock_invoice_repo, mock_view_cache):
    return DeleteInvoice(
        uow=mock_uow,
        invoice_repo=mock_invoice_repo,
        view_cache=mock_view_cache,
    )


@pytest.mark.asyncio
class TestDeleteInvoice:

    async def test_delete_existing_invoice(
        self, delete_invoice_use_case, mock_invoice_repo, mock_uow, mock_view_cache
    ):
        """
        Given: An existing invoice
        When: delete_invoice is called
        Then: One delete is issued, committed and the list view invalidated
        """
        # Arrange
        mock_invoice_repo.delete = AsyncMock(return_value=1)

        # Act
        result = await delete_invoice_use_case.execute("inv_1")

        # Assert
        assert result.is_ok()
        mock_invoice_repo.delete.assert_called_once_with("inv_1")
        mock_uow.commit.assert_called_once()
        mock_view_cache.invalidate.assert_called_once_with("/dashboard/invoices")

    async def test_delete_unknown_invoice_succeeds(
        self, delete_invoice_use_case, mock_invoice_repo, mock_view_cache
    ):
        """Deleting a missing id is reported as success"""
        mock_invoice_repo.delete = AsyncMock(return_value=0)

        result = await delete_invoice_use_case.execute("missing")

        assert result.is_ok()
        mock_view_cache.invalidate.assert_called_once_with("/dashboard/invoices")

    async def test_database_error_returns_message(
        self, delete_invoice_use_case, mock_invoice_repo, mock_uow, mock_view_cache
    ):
        mock_invoice_repo.delete = AsyncMock(side_effect=Exception("foreign key violation"))

        result = await delete_invoice_use_case.execute("inv_1")

        assert result.is_err()
        assert result.error.code == "DATABASE_ERROR"
        assert result.error.message == "Database Error: Failed to Delete Invoice."
        mock_uow.rollback.assert_called_once()
        mock_view_cache.invalidate.assert_not_called()

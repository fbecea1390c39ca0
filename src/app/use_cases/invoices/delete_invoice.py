"""DeleteInvoice Use Case

Removes an invoice and invalidates the invoice list view. Deletion is
triggered from the list itself, so no redirect happens.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.view_cache import ViewCache
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import INVOICES_VIEW_PATH

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice by ID

    Deleting an id that does not exist still succeeds.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        view_cache: ViewCache,
        invoices_path: str = INVOICES_VIEW_PATH,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.view_cache = view_cache
        self.invoices_path = invoices_path

    async def execute(self, invoice_id: str) -> Result[None]:
        try:
            deleted = await self.invoice_repo.delete(invoice_id)
            await self.uow.commit()
            self.view_cache.invalidate(self.invoices_path)
        except Exception as e:
            logger.error(f"Failed to delete invoice {invoice_id}: {e}")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Delete Invoice.",
                    reason=str(e),
                )
            )

        logger.info(f"Deleted invoice {invoice_id} ({deleted} row(s))")
        return Return.ok()

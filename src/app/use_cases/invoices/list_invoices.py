"""ListInvoices and GetInvoice Use Cases

Read side of the invoice list view. The list is served from the view cache
until a mutation invalidates it.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.view_cache import ViewCache
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import INVOICES_VIEW_PATH, InvoiceDTO, InvoiceListResponseDTO

logger = logging.getLogger(__name__)


class ListInvoices:
    """
    Use Case: Render the invoice list

    Reads through the view cache: a cached list is returned as-is, a stale
    path is refetched from the repository and cached again. A list fetched
    while a mutation invalidated the path is returned but not cached.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        view_cache: ViewCache,
        invoices_path: str = INVOICES_VIEW_PATH,
    ):
        self.invoice_repo = invoice_repo
        self.view_cache = view_cache
        self.invoices_path = invoices_path

    async def execute(self) -> Result[InvoiceListResponseDTO]:
        cached = self.view_cache.get(self.invoices_path)
        if cached is not None:
            return Return.ok(cached)

        generation = self.view_cache.generation(self.invoices_path)

        try:
            invoices = await self.invoice_repo.list_all()
        except Exception as e:
            logger.error(f"Failed to fetch invoices: {e}")
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Fetch Invoices.",
                    reason=str(e),
                )
            )

        response = InvoiceListResponseDTO(
            invoices=[InvoiceDTO.from_entity(invoice) for invoice in invoices],
            total=len(invoices),
        )
        self.view_cache.set(self.invoices_path, response, generation=generation)
        return Return.ok(response)


class GetInvoice:
    """Use Case: Fetch a single invoice, e.g. to prefill the edit form"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
        except Exception as e:
            logger.error(f"Failed to fetch invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Fetch Invoice.",
                    reason=str(e),
                )
            )

        if invoice is None:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice with ID {invoice_id} not found",
                )
            )

        return Return.ok(InvoiceDTO.from_entity(invoice))

"""UpdateInvoice Use Case

Validates an invoice form and updates customer, amount and status of an
existing invoice. The issue date is never changed.
"""

import logging
from typing import Any, Mapping
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.view_cache import ViewCache
from src.app.services.navigator import Navigator
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import to_cents
from .dtos import INVOICES_VIEW_PATH, validate_invoice_form

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update an invoice from a form submission

    Business Rules:
    1. The invoice id comes from the caller, never from the form
    2. Validation failures are reported per field, like CreateInvoice
    3. No existence check: updating an unknown id succeeds with no rows changed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        view_cache: ViewCache,
        navigator: Navigator,
        invoices_path: str = INVOICES_VIEW_PATH,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.view_cache = view_cache
        self.navigator = navigator
        self.invoices_path = invoices_path

    async def execute(self, invoice_id: str, form: Mapping[str, Any]) -> Result[None]:
        """
        Execute invoice update

        Args:
            invoice_id: Invoice to update
            form: Raw form fields (customerId, amount, status)

        Returns:
            Result error on failure. On success the navigator redirects.
        """
        validated, field_errors = validate_invoice_form(form)
        if validated is None:
            return Return.err(
                Error(
                    code="VALIDATION_FAILED",
                    message="Missing Fields. Failed to Update Invoice.",
                    reason="Invalid form fields: " + ", ".join(sorted(field_errors)),
                    fields=field_errors,
                )
            )

        try:
            updated = await self.invoice_repo.update(
                invoice_id=invoice_id,
                customer_id=validated.customer_id,
                amount=to_cents(validated.amount),
                status=validated.status,
            )
            await self.uow.commit()
        except Exception as e:
            logger.error(f"Failed to update invoice {invoice_id}: {e}")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Update Invoice.",
                    reason=str(e),
                )
            )

        if not updated:
            logger.info(f"Update matched no invoice with id {invoice_id}")

        self.view_cache.invalidate(self.invoices_path)
        self.navigator.redirect(self.invoices_path)

"""CreateInvoice Use Case

Validates an invoice form, inserts the invoice and sends the caller back to
the invoice list.
"""

import logging
from datetime import date
from typing import Any, Callable, Mapping
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.view_cache import ViewCache
from src.app.services.navigator import Navigator
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, to_cents
from .dtos import INVOICES_VIEW_PATH, validate_invoice_form

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create an invoice from a form submission

    Flow:
    1. Validate customerId, amount and status
    2. Convert amount to cents, stamp today's date
    3. Insert and commit
    4. Invalidate the invoice list view
    5. Redirect to the invoice list (ends the action)

    Validation and database failures are returned as errors; nothing is
    invalidated and no redirect happens in that case.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        view_cache: ViewCache,
        navigator: Navigator,
        invoices_path: str = INVOICES_VIEW_PATH,
        today: Callable[[], date] = date.today,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.view_cache = view_cache
        self.navigator = navigator
        self.invoices_path = invoices_path
        self.today = today

    async def execute(self, form: Mapping[str, Any]) -> Result[None]:
        """
        Execute invoice creation

        Args:
            form: Raw form fields (customerId, amount, status)

        Returns:
            Result error with field errors or a database message. On success
            the navigator redirects instead of returning.
        """
        validated, field_errors = validate_invoice_form(form)
        if validated is None:
            return Return.err(
                Error(
                    code="VALIDATION_FAILED",
                    message="Missing Fields. Failed to Create Invoice.",
                    reason="Invalid form fields: " + ", ".join(sorted(field_errors)),
                    fields=field_errors,
                )
            )

        invoice = Invoice(
            customer_id=validated.customer_id,
            amount=to_cents(validated.amount),
            status=validated.status,
            date=self.today().isoformat(),
        )

        try:
            await self.invoice_repo.create(invoice)
            await self.uow.commit()
        except Exception as e:
            logger.error(f"Failed to create invoice for customer {invoice.customer_id}: {e}")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Create Invoice.",
                    reason=str(e),
                )
            )

        logger.info(f"Created invoice {invoice.id} ({invoice.amount} cents, {invoice.status.value})")
        self.view_cache.invalidate(self.invoices_path)
        self.navigator.redirect(self.invoices_path)

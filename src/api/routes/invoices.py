"""Invoice API Routes

Form-handling endpoints for the invoice dashboard. Mutations answer with a
303 redirect to the invoice list on success and an error envelope otherwise.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.app.services.view_cache import ViewCache
from src.app.use_cases.invoices import (
    CreateInvoice,
    UpdateInvoice,
    DeleteInvoice,
    ListInvoices,
    GetInvoice,
    InvoiceDTO,
    InvoiceListResponseDTO,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.navigator import HttpNavigator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_view_cache
from src.api.error import ClientError

router = APIRouter(prefix="/dashboard/invoices", tags=["Invoices"])

ERROR_STATUS = {
    "VALIDATION_FAILED": status.HTTP_400_BAD_REQUEST,
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DATABASE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

FORM_ERROR_RESPONSES = {
    303: {"description": "Saved, redirect to the invoice list"},
    400: {
        "description": "Invalid form fields",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_FAILED",
                        "message": "Missing Fields. Failed to Create Invoice.",
                        "fields": {"amount": ["Please enter a valid amount."]}
                    }
                }
            }
        }
    },
    500: {"description": "Database error"},
}


def raise_for_error(error: Error):
    raise ClientError(error, status_code=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST))


@router.get("", response_model=InvoiceListResponseDTO)
async def list_invoices(
    session: AsyncSession = Depends(get_session),
    view_cache: ViewCache = Depends(get_view_cache),
):
    """
    Render the invoice list (served from the view cache until a mutation
    invalidates it).
    """
    use_case = ListInvoices(
        SqlAlchemyInvoiceRepository(session),
        view_cache,
        invoices_path=ApplicationConfig.INVOICES_VIEW_PATH,
    )
    result = await use_case.execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{invoice_id}", response_model=InvoiceDTO)
async def get_invoice(invoice_id: str, session: AsyncSession = Depends(get_session)):
    result = await GetInvoice(SqlAlchemyInvoiceRepository(session)).execute(invoice_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/create", status_code=status.HTTP_303_SEE_OTHER, responses=FORM_ERROR_RESPONSES)
async def create_invoice(
    request: Request,
    session: AsyncSession = Depends(get_session),
    view_cache: ViewCache = Depends(get_view_cache),
):
    """
    Create an invoice from a form post.

    **Form fields:**
    - `customerId` (required): Customer reference
    - `amount` (required): Amount, e.g. `45.00`
    - `status` (required): `pending` or `paid`
    """
    form = await request.form()
    use_case = CreateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        view_cache,
        HttpNavigator(),
        invoices_path=ApplicationConfig.INVOICES_VIEW_PATH,
    )
    # Success leaves through the navigator redirect, so only failures return here
    result = await use_case.execute(form)
    raise_for_error(result.error)


@router.post("/{invoice_id}/edit", status_code=status.HTTP_303_SEE_OTHER, responses=FORM_ERROR_RESPONSES)
async def update_invoice(
    invoice_id: str,
    request: Request,
    session: AsyncSession = Depends(get_session),
    view_cache: ViewCache = Depends(get_view_cache),
):
    """
    Update customer, amount and status of an invoice from a form post.
    The issue date is kept.
    """
    form = await request.form()
    use_case = UpdateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        view_cache,
        HttpNavigator(),
        invoices_path=ApplicationConfig.INVOICES_VIEW_PATH,
    )
    # Success leaves through the navigator redirect, so only failures return here
    result = await use_case.execute(invoice_id, form)
    raise_for_error(result.error)


@router.post("/{invoice_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session),
    view_cache: ViewCache = Depends(get_view_cache),
):
    """
    Delete an invoice. Unknown ids are not an error.
    """
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        view_cache,
        invoices_path=ApplicationConfig.INVOICES_VIEW_PATH,
    )
    result = await use_case.execute(invoice_id)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

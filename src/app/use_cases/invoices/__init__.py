"""Invoice use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .list_invoices import ListInvoices, GetInvoice
from .dtos import (
    INVOICES_VIEW_PATH,
    InvoiceForm,
    InvoiceDTO,
    InvoiceListResponseDTO,
    validate_invoice_form,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "ListInvoices",
    "GetInvoice",
    "INVOICES_VIEW_PATH",
    "InvoiceForm",
    "InvoiceDTO",
    "InvoiceListResponseDTO",
    "validate_invoice_form",
]

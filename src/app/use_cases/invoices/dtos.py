"""Data Transfer Objects for Invoice Use Cases

Pydantic models for form validation and response outputs.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional, Tuple
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from src.domain.invoice import Invoice, InvoiceStatus, MAX_AMOUNT

INVOICES_VIEW_PATH = "/dashboard/invoices"

# Form keys read from a submission. id and date are server generated.
FORM_FIELDS = ("customerId", "amount", "status")

FieldErrors = Dict[str, List[str]]


class InvoiceForm(BaseModel):
    """
    Validated invoice form submission

    Shared by the create and update actions. Every field is required;
    missing values are reported the same way as invalid ones.
    """

    customer_id: str = Field(
        default=None,
        alias="customerId",
        validate_default=True,
        description="Customer reference (required, non-empty)"
    )

    amount: Decimal = Field(
        default=None,
        validate_default=True,
        description="Amount in major currency units"
    )

    status: InvoiceStatus = Field(
        default=None,
        validate_default=True,
        description="Invoice status (pending or paid)"
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "customerId": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
                "amount": "45.00",
                "status": "pending"
            }
        }

    @field_validator('customer_id', mode='before')
    @classmethod
    def validate_customer_id(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("customer_required", "Please select a customer.")
        return v.strip()

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, v):
        """
        Coerce form text to Decimal

        Blank, NaN and infinite values are rejected, as are amounts whose
        cents value would not fit the amount column.
        """
        if v is None or isinstance(v, bool):
            raise PydanticCustomError("amount_invalid", "Please enter a valid amount.")
        try:
            amount = Decimal(str(v).strip())
        except (InvalidOperation, ValueError):
            raise PydanticCustomError("amount_invalid", "Please enter a valid amount.")
        if not amount.is_finite() or amount.copy_abs() > MAX_AMOUNT:
            raise PydanticCustomError("amount_invalid", "Please enter a valid amount.")
        return amount

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v):
        if v not in (InvoiceStatus.PENDING.value, InvoiceStatus.PAID.value):
            raise PydanticCustomError("status_invalid", "Please select an invoice status.")
        return InvoiceStatus(v)


def validate_invoice_form(form: Mapping[str, Any]) -> Tuple[Optional[InvoiceForm], FieldErrors]:
    """
    Validate a raw form submission

    Never raises on bad input.

    Returns:
        (InvoiceForm, {}) on success, (None, field errors) on failure.
        Field errors are keyed by form key, e.g. {"amount": ["Please enter a valid amount."]}
    """
    data = {key: form.get(key) for key in FORM_FIELDS}
    try:
        return InvoiceForm.model_validate(data), {}
    except ValidationError as e:
        field_errors: FieldErrors = {}
        for error in e.errors():
            name = str(error["loc"][0]) if error["loc"] else "form"
            field_errors.setdefault(name, []).append(error["msg"])
        return None, field_errors


class InvoiceDTO(BaseModel):
    """
    Response DTO for a single invoice
    """

    id: str = Field(..., description="Invoice ID")
    customer_id: str = Field(..., description="Customer reference")
    amount: int = Field(..., description="Amount in cents")
    status: str = Field(..., description="Invoice status")
    date: str = Field(..., description="Issue date (YYYY-MM-DD)")

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceDTO":
        return cls(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=invoice.amount,
            status=InvoiceStatus(invoice.status).value,
            date=invoice.date,
        )


class InvoiceListResponseDTO(BaseModel):
    """
    Response DTO for the invoice list view
    """

    invoices: List[InvoiceDTO] = Field(default_factory=list)
    total: int = Field(..., description="Number of invoices")

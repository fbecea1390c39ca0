"""Invoice Domain Entity

Tracks customer invoices and their payment status.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, String, Enum as SAEnum
from src.domain.base import BaseModel, generate_uuid

CENTS = Decimal("100")

# Largest amount whose cents value fits the signed 64-bit amount column
MAX_CENTS = 2 ** 63 - 1
MAX_AMOUNT = Decimal(MAX_CENTS).scaleb(-2)


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"


def to_cents(amount: Decimal) -> int:
    """
    Convert a decimal amount to minor currency units

    Multiplies by 100 and rounds half-to-even, so "45.00" -> 4500 and
    "0.125" -> 12.
    """
    return int((Decimal(amount) * CENTS).quantize(Decimal("1"), rounding=ROUND_HALF_EVEN))


class Invoice(BaseModel, table=True):
    """
    Invoice - Amount owed by a customer

    Domain Rules:
    - id is generated server side
    - amount is stored in cents (validated amount * 100)
    - date is the issue date (YYYY-MM-DD) set on creation and never updated
    - status is either pending or paid
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_status', 'status'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique invoice identifier (UUID)"
    )

    customer_id: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer reference"
    )

    amount: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Amount in cents"
    )

    status: InvoiceStatus = Field(
        sa_column=Column(
            SAEnum(
                InvoiceStatus,
                native_enum=False,
                length=16,
                values_callable=lambda statuses: [s.value for s in statuses],
            ),
            nullable=False,
        ),
        description="Invoice status (pending, paid)"
    )

    date: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="Issue date (YYYY-MM-DD)"
    )


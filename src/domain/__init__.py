from .base import BaseModel, generate_uuid
from .invoice import Invoice, InvoiceStatus, to_cents
from .user import User

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Invoice",
    "InvoiceStatus",
    "to_cents",
    "User",
]

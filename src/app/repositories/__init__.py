from .invoice_repository import InvoiceRepository
from .user_repository import UserRepository

__all__ = [
    "InvoiceRepository",
    "UserRepository",
]

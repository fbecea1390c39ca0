"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Every write method issues exactly one statement against the invoices table.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Insert a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Invoice]:
        """
        Retrieve all invoices, newest issue date first

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def update(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        """
        Update customer, amount and status of an invoice

        The issue date is left untouched.

        Args:
            invoice_id: Invoice ID
            customer_id: Customer reference
            amount: Amount in cents
            status: New status

        Returns:
            Number of rows affected (0 when the id does not exist)
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: str) -> int:
        """
        Delete an invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Number of rows affected (0 when the id does not exist)
        """
        pass

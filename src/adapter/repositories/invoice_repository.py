"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlalchemy import update, delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Statements are parameterized;
    committing is left to the unit of work.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        return invoice

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Invoice]:
        statement = select(Invoice).order_by(Invoice.date.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        """
        Update customer, amount and status in a single UPDATE

        Returns:
            Number of rows affected
        """
        statement = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status)
        )
        result = await self.session.execute(statement)
        return result.rowcount

    async def delete(self, invoice_id: str) -> int:
        """
        Delete an invoice in a single DELETE

        Returns:
            Number of rows affected
        """
        statement = delete(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.rowcount

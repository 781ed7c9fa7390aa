"""SQLAlchemy Invoice Line Repository Implementation

Implements invoice line persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice_line import InvoiceLine


class SqlAlchemyInvoiceLineRepository(InvoiceLineRepository):
    """
    SQLAlchemy implementation of InvoiceLineRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items ordered by position
        """
        statement = (
            select(InvoiceLine)
            .where(InvoiceLine.invoice_id == invoice_id)
            .order_by(InvoiceLine.position, InvoiceLine.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create_many(self, invoice_lines: List[InvoiceLine]) -> List[InvoiceLine]:
        """
        Persist line items

        Args:
            invoice_lines: InvoiceLine entities to persist

        Returns:
            Created InvoiceLine items with generated IDs
        """
        self.session.add_all(invoice_lines)
        await self.session.flush()
        for line in invoice_lines:
            await self.session.refresh(line)
        return invoice_lines

    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        """
        Remove all line items of an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            Number of removed rows
        """
        statement = delete(InvoiceLine).where(InvoiceLine.invoice_id == invoice_id)
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount or 0

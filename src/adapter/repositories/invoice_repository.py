"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from decimal import Decimal
from typing import Optional, List, Dict, Any
from datetime import datetime
from sqlalchemy import case, extract
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_totals import to_money


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, tenant_id: str, invoice_id: int) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.tenant_id == tenant_id)
            .where(Invoice.id == invoice_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_tenant(
        self,
        tenant_id: str,
        status: Optional[InvoiceStatus] = None,
        customer_id: Optional[int] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Invoice]:
        """
        List a tenant's invoices, newest first

        Args:
            tenant_id: Tenant identifier
            status: Optional filter by status
            customer_id: Optional filter by customer
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            List of invoices
        """
        statement = select(Invoice).where(Invoice.tenant_id == tenant_id)

        if status:
            statement = statement.where(Invoice.status == status)

        if customer_id is not None:
            statement = statement.where(Invoice.customer_id == customer_id)

        statement = statement.order_by(Invoice.created_at.desc(), Invoice.id.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        invoice.updated_at = datetime.utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()

    async def get_overview(self, tenant_id: str) -> Dict[str, Any]:
        """
        Aggregate invoice figures for a tenant

        Returns:
            Dict with counts per status, total and average amount
        """

        def count_status(status: InvoiceStatus):
            return func.coalesce(
                func.sum(case((Invoice.status == status, 1), else_=0)), 0
            )

        statement = select(
            func.count(Invoice.id),
            func.coalesce(func.sum(Invoice.total), 0),
            count_status(InvoiceStatus.PENDING),
            count_status(InvoiceStatus.PAID),
            count_status(InvoiceStatus.OVERDUE),
        ).where(Invoice.tenant_id == tenant_id)

        result = await self.session.execute(statement)
        count, total, pending, paid, overdue = result.one()

        total_amount = to_money(total or 0)
        average_amount = to_money(total_amount / count) if count else to_money(0)

        return {
            "total_invoices": int(count),
            "total_amount": total_amount,
            "average_amount": average_amount,
            "pending_invoices": int(pending),
            "paid_invoices": int(paid),
            "overdue_invoices": int(overdue),
        }

    async def get_monthly_totals(self, tenant_id: str, months: int = 12) -> List[Dict[str, Any]]:
        """
        Invoice count and amount per calendar month of issue_date

        Args:
            tenant_id: Tenant identifier
            months: Number of months to return

        Returns:
            List of dicts with year, month, count, total (most recent first)
        """
        year = extract("year", Invoice.issue_date).label("year")
        month = extract("month", Invoice.issue_date).label("month")

        statement = (
            select(year, month, func.count(Invoice.id), func.sum(Invoice.total))
            .where(Invoice.tenant_id == tenant_id)
            .group_by(year, month)
            .order_by(year.desc(), month.desc())
            .limit(months)
        )

        result = await self.session.execute(statement)
        return [
            {
                "year": int(row_year),
                "month": int(row_month),
                "count": int(count),
                "total": to_money(total or Decimal("0")),
            }
            for row_year, row_month, count, total in result.all()
        ]

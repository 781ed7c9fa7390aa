"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Lookups are scoped by tenant_id. Invoice numbers are allocated by
    InvoiceNumberAllocator, not by this repository.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, tenant_id: str, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve a tenant's invoice by ID

        Args:
            tenant_id: Tenant identifier
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        """
        Retrieve invoice by invoice number

        Args:
            invoice_number: Unique invoice number

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """
        Hard delete an invoice

        Args:
            invoice: Invoice entity to remove
        """
        pass

    @abstractmethod
    async def get_overview(self, tenant_id: str) -> Dict[str, Any]:
        """
        Aggregate invoice figures for a tenant

        Returns:
            Dict with total_invoices, total_amount, average_amount,
            pending_invoices, paid_invoices, overdue_invoices
        """
        pass

    @abstractmethod
    async def get_monthly_totals(self, tenant_id: str, months: int = 12) -> List[Dict[str, Any]]:
        """
        Invoice count and amount per calendar month, most recent first

        Args:
            tenant_id: Tenant identifier
            months: Number of months to return

        Returns:
            List of dicts with year, month, count, total
        """
        pass

"""Invoice Line Repository Interface

Defines the contract for invoice line persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_line import InvoiceLine


class InvoiceLineRepository(ABC):
    """
    Repository interface for InvoiceLine persistence

    Provides access to invoice line items in display order.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice, ordered by position

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items
        """
        pass

    @abstractmethod
    async def create_many(self, invoice_lines: List[InvoiceLine]) -> List[InvoiceLine]:
        """
        Persist line items

        Args:
            invoice_lines: InvoiceLine entities to persist

        Returns:
            Created InvoiceLine items with generated IDs
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        """
        Remove all line items of an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            Number of removed rows
        """
        pass

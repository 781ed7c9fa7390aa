"""Invoice Number Allocation

Hands out unique, monotonically increasing invoice numbers per year.
"""

import logging
from src.app.repositories.counter_repository import CounterRepository
from src.app.services.errors import NumberingFailed

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "INV"


def counter_key(year: int) -> str:
    """Counter key of the invoice sequence for a year"""
    return f"invoice-{year}"


def format_invoice_number(prefix: str, year: int, seq: int) -> str:
    """Format as PREFIX-YEAR-NNN, zero-padded to at least 3 digits"""
    return f"{prefix}-{year}-{seq:03d}"


class InvoiceNumberAllocator:
    """
    Allocates invoice numbers from the per-year counter

    The sequence is shared by all tenants so numbers are globally unique;
    the tenant only contributes its prefix. Uniqueness under concurrency
    relies on CounterRepository.increment being atomic.
    """

    def __init__(self, counter_repo: CounterRepository):
        self.counter_repo = counter_repo

    async def allocate(self, year: int, prefix: str = DEFAULT_PREFIX) -> str:
        """
        Allocate the next invoice number for a year

        Args:
            year: Calendar year of the invoice
            prefix: Tenant invoice prefix (defaults to INV)

        Returns:
            Invoice number, e.g. INV-2025-001

        Raises:
            NumberingFailed: If the counter could not be incremented
        """
        key = counter_key(year)
        try:
            seq = await self.counter_repo.increment(key)
        except Exception as e:
            logger.error(f"Invoice number allocation failed for {key}: {e}")
            raise NumberingFailed(
                f"Could not allocate invoice number for {year}", cause=e
            ) from e

        return format_invoice_number(prefix or DEFAULT_PREFIX, year, seq)

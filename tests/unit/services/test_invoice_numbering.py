"""Unit tests for InvoiceNumberAllocator

Tests cover:
- Sequential numbers from an empty counter
- Prefix and zero padding
- Per-year sequences
- Uniqueness and contiguity under concurrent allocation
- Counter failures surface as NumberingFailed
"""

import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.repositories.counter_repository import InMemoryCounterRepository
from src.app.services.errors import NumberingFailed
from src.app.services.invoice_numbering import (
    InvoiceNumberAllocator,
    counter_key,
    format_invoice_number,
)


def test_counter_key():
    assert counter_key(2025) == "invoice-2025"


def test_format_pads_to_three_digits():
    assert format_invoice_number("INV", 2025, 1) == "INV-2025-001"
    assert format_invoice_number("INV", 2025, 42) == "INV-2025-042"
    assert format_invoice_number("INV", 2025, 1234) == "INV-2025-1234"


@pytest.mark.asyncio
class TestAllocate:
    async def test_three_allocations_from_empty(self):
        """
        Given: No counter for 2025
        When: Three numbers are allocated
        Then: INV-2025-001, INV-2025-002, INV-2025-003
        """
        allocator = InvoiceNumberAllocator(InMemoryCounterRepository())

        numbers = [await allocator.allocate(2025) for _ in range(3)]

        assert numbers == ["INV-2025-001", "INV-2025-002", "INV-2025-003"]

    async def test_uses_tenant_prefix(self):
        allocator = InvoiceNumberAllocator(InMemoryCounterRepository())

        assert await allocator.allocate(2025, "NW") == "NW-2025-001"

    async def test_empty_prefix_falls_back_to_default(self):
        allocator = InvoiceNumberAllocator(InMemoryCounterRepository())

        assert await allocator.allocate(2025, "") == "INV-2025-001"

    async def test_years_have_independent_sequences(self):
        allocator = InvoiceNumberAllocator(
            InMemoryCounterRepository({"invoice-2024": 17})
        )

        assert await allocator.allocate(2024) == "INV-2024-018"
        assert await allocator.allocate(2025) == "INV-2025-001"

    async def test_concurrent_allocations_are_distinct_and_contiguous(self):
        """
        Given: 50 concurrent allocations for the same year
        When: All complete
        Then: Sequence numbers are exactly 1..50
        """
        counters = InMemoryCounterRepository()
        allocator = InvoiceNumberAllocator(counters)

        numbers = await asyncio.gather(*(allocator.allocate(2025) for _ in range(50)))

        assert len(set(numbers)) == 50
        suffixes = sorted(int(number.rsplit("-", 1)[1]) for number in numbers)
        assert suffixes == list(range(1, 51))
        assert await counters.current("invoice-2025") == 50

    async def test_counter_failure_raises_numbering_failed(self):
        counter_repo = MagicMock()
        counter_repo.increment = AsyncMock(side_effect=RuntimeError("database is locked"))
        allocator = InvoiceNumberAllocator(counter_repo)

        with pytest.raises(NumberingFailed) as exc_info:
            await allocator.allocate(2025)

        assert exc_info.value.code == "NUMBERING_FAILED"
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert exc_info.value.reason == "database is locked"

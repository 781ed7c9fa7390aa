"""Unit tests for GetInvoice, ListInvoices, DeleteInvoice and GetInvoiceStats"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing import (
    GetInvoice,
    ListInvoices,
    DeleteInvoice,
    GetInvoiceStats,
)
from src.domain.invoice import Invoice, InvoiceStatus


def make_invoice(invoice_id=1, number="INV-2025-001", status=InvoiceStatus.PENDING):
    return Invoice(
        id=invoice_id,
        tenant_id="tenant_123",
        invoice_number=number,
        customer_id=7,
        customer_name="Acme Corp",
        issue_date=date(2025, 3, 1),
        due_date=date(2025, 3, 31),
        status=status,
        subtotal=Decimal("25.50"),
        tax_rate=Decimal("0.10"),
        tax=Decimal("2.55"),
        total=Decimal("28.05"),
        created_at=datetime(2025, 3, 1, 9, 0, 0),
        updated_at=datetime(2025, 3, 1, 9, 0, 0),
    )


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def mock_invoice_line_repo():
    repo = MagicMock()
    repo.get_by_invoice_id = AsyncMock(return_value=[])
    repo.delete_by_invoice_id = AsyncMock(return_value=2)
    return repo


@pytest.mark.asyncio
class TestGetInvoice:
    async def test_found(self, mock_invoice_repo, mock_invoice_line_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=make_invoice())

        result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute("tenant_123", 1)

        assert result.is_ok()
        assert result.value.invoice_number == "INV-2025-001"
        mock_invoice_repo.get_by_id.assert_awaited_once_with("tenant_123", 1)

    async def test_other_tenant_is_not_found(self, mock_invoice_repo, mock_invoice_line_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute("tenant_other", 1)

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"


@pytest.mark.asyncio
class TestListInvoices:
    async def test_lists_with_filters(self, mock_invoice_repo):
        mock_invoice_repo.list_by_tenant = AsyncMock(
            return_value=[make_invoice(2, "INV-2025-002"), make_invoice(1)]
        )

        result = await ListInvoices(mock_invoice_repo).execute(
            "tenant_123", status=InvoiceStatus.PENDING, customer_id=7, limit=10, offset=0
        )

        assert result.is_ok()
        assert result.value.count == 2
        assert [i.invoice_number for i in result.value.invoices] == ["INV-2025-002", "INV-2025-001"]
        mock_invoice_repo.list_by_tenant.assert_awaited_once_with(
            tenant_id="tenant_123",
            status=InvoiceStatus.PENDING,
            customer_id=7,
            limit=10,
            offset=0,
        )

    async def test_repository_failure(self, mock_invoice_repo):
        mock_invoice_repo.list_by_tenant = AsyncMock(side_effect=Exception("Database error"))

        result = await ListInvoices(mock_invoice_repo).execute("tenant_123")

        assert result.is_err()
        assert result.error.code == "LIST_INVOICES_FAILED"


@pytest.mark.asyncio
class TestDeleteInvoice:
    async def test_deletes_lines_then_invoice(self, mock_uow, mock_invoice_repo, mock_invoice_line_repo):
        invoice = make_invoice()
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice)
        mock_invoice_repo.delete = AsyncMock()

        result = await DeleteInvoice(mock_uow, mock_invoice_repo, mock_invoice_line_repo).execute(
            "tenant_123", 1
        )

        assert result.is_ok()
        assert result.value.deleted is True
        assert result.value.invoice_number == "INV-2025-001"
        mock_invoice_line_repo.delete_by_invoice_id.assert_awaited_once_with(1)
        mock_invoice_repo.delete.assert_awaited_once_with(invoice)
        mock_uow.commit.assert_awaited_once()

    async def test_not_found(self, mock_uow, mock_invoice_repo, mock_invoice_line_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await DeleteInvoice(mock_uow, mock_invoice_repo, mock_invoice_line_repo).execute(
            "tenant_123", 1
        )

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestGetInvoiceStats:
    async def test_overview_and_monthly(self, mock_invoice_repo):
        mock_invoice_repo.get_overview = AsyncMock(return_value={
            "total_invoices": 3,
            "total_amount": Decimal("84.15"),
            "average_amount": Decimal("28.05"),
            "pending_invoices": 2,
            "paid_invoices": 1,
            "overdue_invoices": 0,
        })
        mock_invoice_repo.get_monthly_totals = AsyncMock(return_value=[
            {"year": 2025, "month": 3, "count": 2, "total": Decimal("56.10")},
            {"year": 2025, "month": 2, "count": 1, "total": Decimal("28.05")},
        ])

        result = await GetInvoiceStats(mock_invoice_repo).execute("tenant_123")

        assert result.is_ok()
        assert result.value.overview.total_invoices == 3
        assert result.value.overview.average_amount == Decimal("28.05")
        assert [(m.year, m.month) for m in result.value.monthly] == [(2025, 3), (2025, 2)]
        mock_invoice_repo.get_monthly_totals.assert_awaited_once_with("tenant_123", months=12)

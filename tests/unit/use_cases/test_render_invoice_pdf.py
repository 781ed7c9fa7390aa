"""Unit tests for RenderInvoicePdf use case"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.errors import RenderFailed
from src.app.services.pdf_service import PdfRenderOptions
from src.app.use_cases.invoicing.render_invoice_pdf import RenderInvoicePdf
from src.domain.invoice import Invoice, InvoiceStatus


@pytest.fixture
def sample_invoice():
    return Invoice(
        id=1,
        tenant_id="tenant_123",
        invoice_number="INV-2025-001",
        customer_id=7,
        customer_name="Acme Corp",
        issue_date=date(2025, 3, 1),
        due_date=date(2025, 3, 31),
        status=InvoiceStatus.PENDING,
        subtotal=Decimal("0.00"),
        tax_rate=Decimal("0.10"),
        tax=Decimal("0.00"),
        total=Decimal("0.00"),
        created_at=datetime(2025, 3, 1, 9, 0, 0),
        updated_at=datetime(2025, 3, 1, 9, 0, 0),
    )


@pytest.fixture
def mock_invoice_repo(sample_invoice):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sample_invoice)
    return repo


@pytest.fixture
def mock_invoice_line_repo():
    repo = MagicMock()
    repo.get_by_invoice_id = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_customer_repo(sample_customer):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sample_customer)
    return repo


@pytest.fixture
def mock_profile_repo():
    repo = MagicMock()
    repo.get_by_tenant_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_pdf_service():
    service = MagicMock()
    service.render = MagicMock(return_value=b"%PDF-1.4\nTest PDF content")
    return service


@pytest.fixture
def mock_logo_storage():
    storage = MagicMock()
    storage.resolve = MagicMock(return_value="/var/logos/logo-1.png")
    return storage


@pytest.fixture
def render_use_case(
    mock_invoice_repo,
    mock_invoice_line_repo,
    mock_customer_repo,
    mock_profile_repo,
    mock_pdf_service,
    mock_logo_storage,
):
    return RenderInvoicePdf(
        invoice_repo=mock_invoice_repo,
        invoice_line_repo=mock_invoice_line_repo,
        customer_repo=mock_customer_repo,
        profile_repo=mock_profile_repo,
        pdf_service=mock_pdf_service,
        logo_storage=mock_logo_storage,
    )


@pytest.mark.asyncio
class TestRenderInvoicePdf:
    async def test_returns_document(self, render_use_case, mock_pdf_service, sample_invoice, sample_customer):
        result = await render_use_case.execute("tenant_123", 1)

        assert result.is_ok()
        assert result.value.filename == "invoice-INV-2025-001.pdf"
        assert result.value.content.startswith(b"%PDF-")
        mock_pdf_service.render.assert_called_once_with(
            sample_invoice, [], sample_customer, None, PdfRenderOptions(logo_path=None)
        )

    async def test_resolves_profile_logo(
        self, render_use_case, mock_profile_repo, mock_pdf_service, mock_logo_storage, sample_profile
    ):
        sample_profile.logo_path = "logo-1.png"
        mock_profile_repo.get_by_tenant_id = AsyncMock(return_value=sample_profile)

        result = await render_use_case.execute("tenant_123", 1)

        assert result.is_ok()
        mock_logo_storage.resolve.assert_called_once_with("logo-1.png")
        options = mock_pdf_service.render.call_args.args[4]
        assert options.logo_path == "/var/logos/logo-1.png"

    async def test_deleted_customer_still_renders(self, render_use_case, mock_customer_repo, mock_pdf_service):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)

        result = await render_use_case.execute("tenant_123", 1)

        assert result.is_ok()
        assert mock_pdf_service.render.call_args.args[2] is None

    async def test_invoice_not_found(self, render_use_case, mock_invoice_repo, mock_pdf_service):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await render_use_case.execute("tenant_123", 99)

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_pdf_service.render.assert_not_called()

    async def test_render_failure(self, render_use_case, mock_pdf_service):
        mock_pdf_service.render = MagicMock(
            side_effect=RenderFailed("PDF generation failed", cause=ValueError("bad font"))
        )

        result = await render_use_case.execute("tenant_123", 1)

        assert result.is_err()
        assert result.error.code == "RENDER_FAILED"
        assert result.error.reason == "bad font"

    async def test_unexpected_failure_is_render_failed(self, render_use_case, mock_pdf_service):
        mock_pdf_service.render = MagicMock(side_effect=MemoryError())

        result = await render_use_case.execute("tenant_123", 1)

        assert result.is_err()
        assert result.error.code == "RENDER_FAILED"

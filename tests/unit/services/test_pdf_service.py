"""Unit tests for ReportLabPdfService

Tests cover:
- Valid PDF output for complete and minimal invoices
- Placeholders when profile, customer or logo are missing
- Logo images, corrupt logos and unsupported fonts
- Page overflow for long item tables
- Failures surface as RenderFailed
"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from io import BytesIO
from unittest.mock import patch

from PIL import Image
from pypdf import PdfReader

from src.adapter.services.pdf_service import (
    ReportLabPdfService,
    resolve_font_faces,
    format_money,
    format_date,
    format_quantity,
)
from src.app.services.errors import RenderFailed
from src.app.services.pdf_service import PdfRenderOptions
from src.domain.business_profile import FontFamily
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine


def pdf_text(content: bytes) -> str:
    reader = PdfReader(BytesIO(content))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def page_count(content: bytes) -> int:
    return len(PdfReader(BytesIO(content)).pages)


@pytest.fixture
def pdf_service():
    return ReportLabPdfService()


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
        subtotal=Decimal("25.50"),
        tax_rate=Decimal("0.10"),
        tax=Decimal("2.55"),
        total=Decimal("28.05"),
        notes="Thanks!",
        created_at=datetime(2025, 3, 1, 9, 0, 0),
        updated_at=datetime(2025, 3, 1, 9, 0, 0),
    )


@pytest.fixture
def sample_lines():
    return [
        InvoiceLine(
            id=1,
            invoice_id=1,
            position=0,
            description="Website design",
            quantity=Decimal("2"),
            unit_price=Decimal("10.00"),
            total_price=Decimal("20.00"),
        ),
        InvoiceLine(
            id=2,
            invoice_id=1,
            position=1,
            description="Hosting",
            quantity=Decimal("1"),
            unit_price=Decimal("5.50"),
            total_price=Decimal("5.50"),
        ),
    ]


class TestFormatting:
    def test_font_map(self):
        assert resolve_font_faces(FontFamily.HELVETICA) == ("Helvetica", "Helvetica-Bold")
        assert resolve_font_faces(FontFamily.ARIAL) == ("Helvetica", "Helvetica-Bold")
        assert resolve_font_faces(FontFamily.VERDANA) == ("Helvetica", "Helvetica-Bold")
        assert resolve_font_faces(FontFamily.TIMES_NEW_ROMAN) == ("Times-Roman", "Times-Bold")
        assert resolve_font_faces(FontFamily.GEORGIA) == ("Times-Roman", "Times-Bold")

    def test_unknown_font_falls_back_to_helvetica(self):
        assert resolve_font_faces("Comic Sans") == ("Helvetica", "Helvetica-Bold")
        assert resolve_font_faces(None) == ("Helvetica", "Helvetica-Bold")

    def test_format_money(self):
        assert format_money(Decimal("1234.5")) == "$1,234.50"
        assert format_money(None) == "$0.00"
        assert format_money(Decimal("10"), "€") == "€10.00"

    def test_format_date(self):
        assert format_date(date(2025, 3, 1)) == "03/01/2025"
        assert format_date(None) == "MM/DD/YYYY"

    def test_format_quantity(self):
        assert format_quantity(Decimal("2.0000")) == "2"
        assert format_quantity(Decimal("1.5000")) == "1.5"


class TestRender:
    def test_complete_invoice(self, pdf_service, sample_invoice, sample_lines, sample_customer, sample_profile):
        content = pdf_service.render(sample_invoice, sample_lines, sample_customer, sample_profile)

        assert content.startswith(b"%PDF-")
        text = pdf_text(content)
        assert "INVOICE" in text
        assert "INV-2025-001" in text
        assert "Northwind Studio" in text
        assert "Acme Corp" in text
        assert "Website design" in text
        assert "03/01/2025" in text
        assert "$28.05" in text
        assert "Tax (10.0%)" in text
        assert "Thanks!" in text
        assert "Thank you for your business!" in text

    def test_no_profile_no_logo_uses_placeholders(self, pdf_service, sample_invoice, sample_lines, sample_customer):
        """
        Given: No business profile and no logo
        When: The invoice is rendered
        Then: Placeholder logo glyph and business name are drawn
        """
        content = pdf_service.render(sample_invoice, sample_lines, sample_customer, None)

        assert content.startswith(b"%PDF-")
        text = pdf_text(content)
        assert "Your logo" in text
        assert "Your Business Name" in text

    def test_sender_snapshot_used_without_profile(self, pdf_service, sample_invoice, sample_lines):
        sample_invoice.sender_name = "Snapshot Studio"

        text = pdf_text(pdf_service.render(sample_invoice, sample_lines, None, None))

        assert "Snapshot Studio" in text
        assert "Your Business Name" not in text

    def test_missing_customer_falls_back_to_invoice(self, pdf_service, sample_invoice, sample_lines):
        text = pdf_text(pdf_service.render(sample_invoice, sample_lines, None, None))

        assert "Acme Corp" in text
        assert "Customer Address" in text

    def test_zero_items_and_no_notes(self, pdf_service, sample_invoice):
        sample_invoice.notes = None
        sample_invoice.subtotal = Decimal("0.00")
        sample_invoice.tax = Decimal("0.00")
        sample_invoice.total = Decimal("0.00")

        content = pdf_service.render(sample_invoice, [], None, None)

        assert content.startswith(b"%PDF-")
        text = pdf_text(content)
        assert "$0.00" in text
        assert "Notes" not in text

    def test_unsupported_font(self, pdf_service, sample_invoice, sample_lines, sample_profile):
        sample_profile.font_family = "Comic Sans"

        content = pdf_service.render(sample_invoice, sample_lines, None, sample_profile)

        assert content.startswith(b"%PDF-")

    def test_times_font(self, pdf_service, sample_invoice, sample_lines, sample_profile):
        sample_profile.font_family = FontFamily.GEORGIA

        content = pdf_service.render(sample_invoice, sample_lines, None, sample_profile)

        assert content.startswith(b"%PDF-")
        assert b"Times-Roman" in content

    def test_logo_image(self, pdf_service, sample_invoice, sample_lines, sample_profile, tmp_path):
        logo_path = tmp_path / "logo.png"
        Image.new("RGB", (240, 60), "orange").save(logo_path)

        content = pdf_service.render(
            sample_invoice,
            sample_lines,
            None,
            sample_profile,
            PdfRenderOptions(logo_path=str(logo_path)),
        )

        assert content.startswith(b"%PDF-")
        assert "Your logo" not in pdf_text(content)

    def test_corrupt_logo_falls_back_to_placeholder(self, pdf_service, sample_invoice, sample_lines, tmp_path):
        logo_path = tmp_path / "logo.png"
        logo_path.write_bytes(b"definitely not an image")

        content = pdf_service.render(
            sample_invoice, sample_lines, None, None, PdfRenderOptions(logo_path=str(logo_path))
        )

        assert content.startswith(b"%PDF-")
        assert "Your logo" in pdf_text(content)

    def test_missing_logo_file_falls_back_to_placeholder(self, pdf_service, sample_invoice, sample_lines, tmp_path):
        content = pdf_service.render(
            sample_invoice,
            sample_lines,
            None,
            None,
            PdfRenderOptions(logo_path=str(tmp_path / "missing.png")),
        )

        assert "Your logo" in pdf_text(content)

    def test_discount_row_only_when_positive(self, pdf_service, sample_invoice, sample_lines):
        with_discount = pdf_text(pdf_service.render(
            sample_invoice, sample_lines, None, None, PdfRenderOptions(discount=Decimal("5.00"))
        ))
        without_discount = pdf_text(pdf_service.render(
            sample_invoice, sample_lines, None, None, PdfRenderOptions(discount=Decimal("0"))
        ))

        assert "Discount" in with_discount
        assert "Discount" not in without_discount

    def test_long_item_table_spans_pages(self, pdf_service, sample_invoice):
        lines = [
            InvoiceLine(
                id=index + 1,
                invoice_id=1,
                position=index,
                description=f"Consulting block {index + 1}",
                quantity=Decimal("1"),
                unit_price=Decimal("10.00"),
                total_price=Decimal("10.00"),
            )
            for index in range(60)
        ]

        content = pdf_service.render(sample_invoice, lines, None, None)

        assert page_count(content) > 1
        text = pdf_text(content)
        assert "Consulting block 1" in text
        assert "Consulting block 60" in text

    def test_failure_raises_render_failed(self, pdf_service, sample_invoice, sample_lines):
        with patch(
            "src.adapter.services.pdf_service._InvoiceComposer.draw_items_table",
            side_effect=RuntimeError("boom"),
        ):
            with pytest.raises(RenderFailed) as exc_info:
                pdf_service.render(sample_invoice, sample_lines, None, None)

        assert exc_info.value.code == "RENDER_FAILED"
        assert isinstance(exc_info.value.cause, RuntimeError)

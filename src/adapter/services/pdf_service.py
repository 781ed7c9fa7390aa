"""ReportLab PDF Generation Service Implementation

Composes invoice PDFs on the ReportLab canvas with a fixed band layout:
logo, issuer, parties and invoice details, item table, summary, terms.
Coordinates in this module are measured from the top of the page.
"""

import logging
import os
from datetime import date, datetime
from decimal import Decimal
from io import BytesIO
from typing import List, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from src.app.services.errors import RenderFailed
from src.app.services.pdf_service import PdfService, PdfRenderOptions
from src.domain.business_profile import (
    BusinessProfile,
    FontFamily,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_TAX_RATE,
)
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.invoice_totals import to_money

logger = logging.getLogger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 40
RIGHT = PAGE_WIDTH - MARGIN
BOTTOM_LIMIT = PAGE_HEIGHT - 50

LOGO_TOP = 30
LOGO_MAX_WIDTH = 120
LOGO_MAX_HEIGHT = 80

TABLE_TOP = 260
TABLE_COLUMNS = [MARGIN, 250, 350, 450, RIGHT]
TABLE_HEADER_HEIGHT = 28
TABLE_ROW_HEIGHT = 24
TABLE_PADDING = 8

SUMMARY_X = 320
DETAILS_X = 320
DETAILS_VALUE_X = DETAILS_X + 100

TEXT_COLOR = colors.HexColor("#1e293b")
TEXT_LIGHT_COLOR = colors.HexColor("#64748b")
BORDER_COLOR = colors.HexColor("#e5e7eb")
ALT_ROW_COLOR = colors.HexColor("#f8fafc")

PAYMENT_TERMS_TEXT = (
    "Payment is due within 30 days of invoice date. "
    "Please include invoice number with payment."
)
THANK_YOU_TEXT = "Thank you for your business!"

BUSINESS_NAME_PLACEHOLDER = "Your Business Name"
BUSINESS_ADDRESS_PLACEHOLDER = "Your Business Address"
BUSINESS_PHONE_PLACEHOLDER = "Your Phone Number"
BUSINESS_EMAIL_PLACEHOLDER = "your@email.com"
LOGO_PLACEHOLDER_TEXT = "Your logo"
CUSTOMER_NAME_PLACEHOLDER = "Customer Name"
CUSTOMER_ADDRESS_PLACEHOLDER = "Customer Address"
CUSTOMER_PHONE_PLACEHOLDER = "Customer Phone"
CUSTOMER_EMAIL_PLACEHOLDER = "customer@email.com"
INVOICE_NUMBER_PLACEHOLDER = "##########"
DATE_PLACEHOLDER = "MM/DD/YYYY"

HELVETICA = ("Helvetica", "Helvetica-Bold")
TIMES = ("Times-Roman", "Times-Bold")

# Every selectable font family maps to one of the base-14 faces
FONT_FACES = {
    FontFamily.HELVETICA.value: HELVETICA,
    FontFamily.ARIAL.value: HELVETICA,
    FontFamily.VERDANA.value: HELVETICA,
    FontFamily.TIMES_NEW_ROMAN.value: TIMES,
    FontFamily.GEORGIA.value: TIMES,
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "CA$",
    "AUD": "A$",
}


def resolve_font_faces(font_family) -> Tuple[str, str]:
    """
    Map a font family choice to (regular, bold) ReportLab faces

    Unknown or empty values fall back to Helvetica.
    """
    name = getattr(font_family, "value", font_family)
    return FONT_FACES.get(name, HELVETICA)


def currency_symbol(currency) -> str:
    code = getattr(currency, "value", currency)
    return CURRENCY_SYMBOLS.get(code, "$")


def format_money(amount, symbol: str = "$") -> str:
    if amount is None:
        amount = 0
    return f"{symbol}{to_money(amount):,.2f}"


def format_date(value) -> str:
    """Format a date as MM/DD/YYYY, or the placeholder when missing"""
    if isinstance(value, (date, datetime)):
        return value.strftime("%m/%d/%Y")
    return DATE_PLACEHOLDER


def format_quantity(quantity) -> str:
    if quantity is None:
        return "#"
    value = Decimal(str(quantity))
    if value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return format(value.normalize(), "f")


def first_text(*values: Optional[str], default: str) -> str:
    """Return the first non-blank value, or default"""
    for value in values:
        if value is not None and str(value).strip():
            return str(value).strip()
    return default


def safe_color(value: Optional[str], default: str):
    try:
        return colors.HexColor(value or default)
    except (ValueError, TypeError):
        return colors.HexColor(default)


class _InvoiceComposer:
    """Draws one invoice onto a canvas, band by band"""

    def __init__(
        self,
        pdf: canvas.Canvas,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Optional[Customer],
        profile: Optional[BusinessProfile],
        options: PdfRenderOptions,
    ):
        self.pdf = pdf
        self.invoice = invoice
        self.lines = invoice_lines or []
        self.customer = customer
        self.profile = profile
        self.options = options

        self.font, self.bold_font = resolve_font_faces(
            profile.font_family if profile else None
        )
        self.primary = safe_color(
            profile.primary_color if profile else None, DEFAULT_PRIMARY_COLOR
        )
        self.symbol = currency_symbol(profile.currency if profile else None)
        self.cursor = 0.0

    # Drawing primitives

    def _baseline(self, top: float, size: float) -> float:
        return PAGE_HEIGHT - top - size

    def _text(
        self,
        text: str,
        x: float,
        top: float,
        font: str,
        size: float,
        color=TEXT_COLOR,
        align: str = "left",
        width: Optional[float] = None,
    ) -> None:
        self.pdf.setFont(font, size)
        self.pdf.setFillColor(color)
        if width is not None:
            text = self._fit(text, font, size, width)
        y = self._baseline(top, size)
        if align == "right":
            self.pdf.drawRightString(x + (width or 0), y, text)
        elif align == "center":
            self.pdf.drawCentredString(x + (width or 0) / 2, y, text)
        else:
            self.pdf.drawString(x, y, text)

    @staticmethod
    def _fit(text: str, font: str, size: float, width: float) -> str:
        """Truncate text with an ellipsis so it fits width"""
        if stringWidth(text, font, size) <= width:
            return text
        ellipsis = "..."
        while text and stringWidth(text + ellipsis, font, size) > width:
            text = text[:-1]
        return text + ellipsis

    def _rect(self, x: float, top: float, width: float, height: float, fill) -> None:
        self.pdf.setFillColor(fill)
        self.pdf.rect(x, PAGE_HEIGHT - top - height, width, height, stroke=0, fill=1)

    def _new_page(self) -> None:
        self.pdf.showPage()
        self.cursor = MARGIN

    def _ensure_space(self, height: float) -> None:
        if self.cursor + height > BOTTOM_LIMIT:
            self._new_page()

    # Bands

    def draw(self) -> None:
        self.draw_logo()
        self.draw_issuer()
        self.draw_parties_and_details()
        self.draw_items_table()
        self.draw_summary()
        self.draw_terms()

    def draw_logo(self) -> None:
        logo_path = self.options.logo_path
        if logo_path and os.path.exists(logo_path):
            try:
                image = ImageReader(logo_path)
                image_width, image_height = image.getSize()
                aspect_ratio = image_width / image_height

                width = LOGO_MAX_WIDTH
                height = width / aspect_ratio
                if height > LOGO_MAX_HEIGHT:
                    height = LOGO_MAX_HEIGHT
                    width = height * aspect_ratio

                self.pdf.drawImage(
                    image,
                    RIGHT - width,
                    PAGE_HEIGHT - LOGO_TOP - height,
                    width=width,
                    height=height,
                    mask="auto",
                )
                return
            except Exception as e:
                logger.warning(f"Error loading logo {logo_path}, using placeholder: {e}")
        self.draw_logo_placeholder()

    def draw_logo_placeholder(self) -> None:
        radius = 30
        center_x = RIGHT - radius
        center_top = LOGO_TOP + 20
        self.pdf.saveState()
        self.pdf.setFillColor(self.primary)
        self.pdf.circle(center_x, PAGE_HEIGHT - center_top, radius, stroke=0, fill=1)
        self.pdf.setFillColor(colors.white)
        self.pdf.setFont("Helvetica-Bold", 10)
        self.pdf.drawCentredString(
            center_x, PAGE_HEIGHT - center_top - 3.5, LOGO_PLACEHOLDER_TEXT
        )
        self.pdf.restoreState()

    def draw_issuer(self) -> None:
        invoice, profile = self.invoice, self.profile
        name = first_text(
            profile.business_name if profile else None,
            invoice.sender_name,
            default=BUSINESS_NAME_PLACEHOLDER,
        )
        address = first_text(
            profile.full_business_address if profile else None,
            invoice.sender_address,
            default=BUSINESS_ADDRESS_PLACEHOLDER,
        )
        phone = first_text(
            profile.business_phone if profile else None,
            invoice.sender_phone,
            default=BUSINESS_PHONE_PLACEHOLDER,
        )
        email = first_text(
            profile.business_email if profile else None,
            invoice.sender_email,
            default=BUSINESS_EMAIL_PLACEHOLDER,
        )

        issuer_width = RIGHT - LOGO_MAX_WIDTH - MARGIN - 10
        self._text("INVOICE", MARGIN, 40, self.bold_font, 24)
        self._text(name, MARGIN, 75, self.bold_font, 12, color=self.primary, width=issuer_width)
        self._text(address, MARGIN, 95, self.font, 10, width=issuer_width)
        self._text(phone, MARGIN, 110, self.font, 10, width=issuer_width)
        self._text(email, MARGIN, 125, self.font, 10, width=issuer_width)

    def draw_parties_and_details(self) -> None:
        invoice, customer = self.invoice, self.customer
        column_width = DETAILS_X - MARGIN - 10

        bill_to = [
            first_text(
                customer.name if customer else None,
                invoice.bill_to_name,
                invoice.customer_name,
                default=CUSTOMER_NAME_PLACEHOLDER,
            ),
            first_text(
                customer.full_address if customer else None,
                invoice.bill_to_address,
                default=CUSTOMER_ADDRESS_PLACEHOLDER,
            ),
            first_text(
                customer.phone if customer else None,
                invoice.bill_to_phone,
                default=CUSTOMER_PHONE_PLACEHOLDER,
            ),
            first_text(
                customer.email if customer else None,
                invoice.bill_to_email,
                default=CUSTOMER_EMAIL_PLACEHOLDER,
            ),
        ]

        self._text("Bill to:", MARGIN, 160, self.bold_font, 10)
        for offset, value in enumerate(bill_to, start=1):
            self._text(value, MARGIN, 160 + offset * 15, self.font, 10, width=column_width)

        status = getattr(invoice.status, "value", invoice.status)
        details = [
            ("Invoice number:", first_text(invoice.invoice_number, default=INVOICE_NUMBER_PLACEHOLDER)),
            ("Invoice date:", format_date(invoice.issue_date)),
            ("Payment due:", format_date(invoice.due_date)),
            ("Status:", first_text(status, default="pending")),
        ]
        value_width = RIGHT - DETAILS_VALUE_X
        for index, (label, value) in enumerate(details):
            top = 160 + index * 15
            self._text(label, DETAILS_X, top, self.bold_font, 10)
            self._text(value, DETAILS_VALUE_X, top, self.font, 10, width=value_width)

    def _draw_table_header(self) -> None:
        cols = TABLE_COLUMNS
        top = self.cursor
        self._rect(cols[0], top, cols[4] - cols[0], TABLE_HEADER_HEIGHT, self.primary)

        header_top = top + TABLE_PADDING
        self._text("Item", cols[0] + TABLE_PADDING, header_top, self.bold_font, 11, color=colors.white)
        self._text("Quantity", cols[1], header_top, self.bold_font, 11, color=colors.white,
                   align="center", width=cols[2] - cols[1])
        self._text("Price per unit", cols[2], header_top, self.bold_font, 11, color=colors.white,
                   align="right", width=cols[3] - cols[2] - TABLE_PADDING)
        self._text("Amount", cols[3], header_top, self.bold_font, 11, color=colors.white,
                   align="right", width=cols[4] - cols[3] - TABLE_PADDING)
        self.cursor = top + TABLE_HEADER_HEIGHT

    def draw_items_table(self) -> None:
        cols = TABLE_COLUMNS
        description_width = cols[1] - cols[0] - 2 * TABLE_PADDING

        self.cursor = TABLE_TOP
        self._draw_table_header()

        for index, line in enumerate(self.lines):
            description = first_text(line.description, default=f"Item {index + 1}")
            wrapped = simpleSplit(description, self.font, 10, description_width) or [description]
            row_height = max(TABLE_ROW_HEIGHT, 2 * TABLE_PADDING + 12 * len(wrapped))

            if self.cursor + row_height > BOTTOM_LIMIT:
                self._new_page()
                self._draw_table_header()

            top = self.cursor
            background = colors.white if index % 2 == 0 else ALT_ROW_COLOR
            self._rect(cols[0], top, cols[4] - cols[0], row_height, background)

            text_top = top + TABLE_PADDING
            for line_index, text in enumerate(wrapped):
                self._text(text, cols[0] + TABLE_PADDING, text_top + line_index * 12, self.font, 10)
            self._text(format_quantity(line.quantity), cols[1], text_top, self.font, 10,
                       align="center", width=cols[2] - cols[1])
            self._text(format_money(line.unit_price, self.symbol), cols[2], text_top, self.font, 10,
                       align="right", width=cols[3] - cols[2] - TABLE_PADDING)
            self._text(format_money(line.total_price, self.symbol), cols[3], text_top, self.font, 10,
                       align="right", width=cols[4] - cols[3] - TABLE_PADDING)
            self.cursor = top + row_height

        self.pdf.setStrokeColor(BORDER_COLOR)
        self.pdf.setLineWidth(1)
        rule_y = PAGE_HEIGHT - self.cursor
        self.pdf.line(cols[0], rule_y, cols[4], rule_y)
        self.cursor += 10

    def draw_summary(self) -> None:
        invoice = self.invoice
        discount = self.options.discount
        show_discount = discount is not None and discount > 0

        rows = 3 if show_discount else 2
        self._ensure_space(20 + rows * 18 + 5 + 45)

        x = SUMMARY_X
        value_width = RIGHT - x - TABLE_PADDING
        top = self.cursor + 20

        tax_rate = invoice.tax_rate if invoice.tax_rate is not None else DEFAULT_TAX_RATE
        summary = [
            ("Subtotal", format_money(invoice.subtotal, self.symbol)),
            (f"Tax ({Decimal(str(tax_rate)) * 100:.1f}%)", format_money(invoice.tax, self.symbol)),
        ]
        if show_discount:
            summary.append(("Discount", f"-{format_money(discount, self.symbol)}"))

        for label, value in summary:
            self._text(label, x, top, self.font, 11)
            self._text(value, x, top, self.font, 11, align="right", width=value_width)
            top += 18

        top += 5
        self._rect(x, top, RIGHT - x, 32, self.primary)
        self._text("TOTAL", x + TABLE_PADDING, top + 9, self.bold_font, 14, color=colors.white)
        self._text(format_money(invoice.total, self.symbol), x, top + 9, self.bold_font, 14,
                   color=colors.white, align="right", width=value_width)
        self.cursor = top + 45

    def _draw_paragraph(self, title: str, body: str, width: float) -> None:
        body_lines = simpleSplit(body, self.font, 10, width)
        self._ensure_space(16 + 13 * min(len(body_lines), 3))
        self._text(title, MARGIN, self.cursor, self.bold_font, 11)
        self.cursor += 16
        for text in body_lines:
            self._ensure_space(13)
            self._text(text, MARGIN, self.cursor, self.font, 10, color=TEXT_LIGHT_COLOR)
            self.cursor += 13

    def draw_terms(self) -> None:
        width = 300
        self.cursor += 20
        self._draw_paragraph("Payment Terms", PAYMENT_TERMS_TEXT, width)

        notes = (self.invoice.notes or "").strip()
        if notes:
            self.cursor += 12
            self._draw_paragraph("Notes", notes, width)

        self.cursor += 20
        self._ensure_space(12)
        self._text(THANK_YOU_TEXT, MARGIN, self.cursor, self.font, 9,
                   color=TEXT_LIGHT_COLOR, align="center", width=RIGHT - MARGIN)


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Generates branded A4 invoices. Missing optional inputs are replaced by
    placeholders; a broken logo falls back to the placeholder glyph; any
    other failure raises RenderFailed.
    """

    def render(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Optional[Customer],
        business_profile: Optional[BusinessProfile] = None,
        options: Optional[PdfRenderOptions] = None,
    ) -> bytes:
        """
        Render an invoice PDF

        Args:
            invoice: Invoice entity
            invoice_lines: Line items in display order
            customer: Billed customer, if it still exists
            business_profile: Tenant profile for issuer details and branding
            options: Logo path and discount

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        try:
            pdf = canvas.Canvas(buffer, pagesize=A4)
            pdf.setTitle(f"Invoice {invoice.invoice_number or ''}".strip())
            pdf.setCreator("invoice-service")
            if business_profile and business_profile.business_name:
                pdf.setAuthor(business_profile.business_name)

            composer = _InvoiceComposer(
                pdf,
                invoice,
                invoice_lines,
                customer,
                business_profile,
                options or PdfRenderOptions(),
            )
            composer.draw()
            pdf.save()
            return buffer.getvalue()
        except Exception as e:
            logger.error(
                f"Failed to render invoice {getattr(invoice, 'invoice_number', None)}: {e}"
            )
            raise RenderFailed("PDF generation failed", cause=e) from e
        finally:
            buffer.close()

"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .delete_invoice import DeleteInvoice
from .get_invoice_stats import GetInvoiceStats
from .render_invoice_pdf import RenderInvoicePdf, pdf_filename
from .line_items import build_invoice_lines
from .dtos import (
    LineItemCommandDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceLineDTO,
    InvoiceSummaryDTO,
    InvoiceResponseDTO,
    InvoiceListResponseDTO,
    InvoiceOverviewDTO,
    MonthlyInvoiceTotalsDTO,
    InvoiceStatsResponseDTO,
    DeleteInvoiceResponseDTO,
    InvoicePdfDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "GetInvoice",
    "ListInvoices",
    "DeleteInvoice",
    "GetInvoiceStats",
    "RenderInvoicePdf",
    "pdf_filename",
    "build_invoice_lines",
    "LineItemCommandDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "InvoiceLineDTO",
    "InvoiceSummaryDTO",
    "InvoiceResponseDTO",
    "InvoiceListResponseDTO",
    "InvoiceOverviewDTO",
    "MonthlyInvoiceTotalsDTO",
    "InvoiceStatsResponseDTO",
    "DeleteInvoiceResponseDTO",
    "InvoicePdfDTO",
]

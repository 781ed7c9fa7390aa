from .base import BaseModel
from .counter import Counter
from .customer import Customer, CustomerStatus
from .business_profile import BusinessProfile, Currency, PaymentTerms, FontFamily
from .invoice import Invoice, InvoiceStatus
from .invoice_line import InvoiceLine
from .invoice_totals import InvoiceTotals, compute_line_item_total, compute_invoice_totals

__all__ = [
    "BaseModel",
    "Counter",
    "Customer",
    "CustomerStatus",
    "BusinessProfile",
    "Currency",
    "PaymentTerms",
    "FontFamily",
    "Invoice",
    "InvoiceStatus",
    "InvoiceLine",
    "InvoiceTotals",
    "compute_line_item_total",
    "compute_invoice_totals",
]

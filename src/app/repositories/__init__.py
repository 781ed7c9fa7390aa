from .counter_repository import CounterRepository
from .customer_repository import CustomerRepository
from .business_profile_repository import BusinessProfileRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository

__all__ = [
    "CounterRepository",
    "CustomerRepository",
    "BusinessProfileRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
]

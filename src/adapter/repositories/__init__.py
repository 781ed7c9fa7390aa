from .counter_repository import SqlAlchemyCounterRepository, InMemoryCounterRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .business_profile_repository import SqlAlchemyBusinessProfileRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository

__all__ = [
    "SqlAlchemyCounterRepository",
    "InMemoryCounterRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyBusinessProfileRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
]

from .unit_of_work import UnitOfWork
from .errors import InvoiceServiceError, NumberingFailed, RenderFailed
from .invoice_numbering import InvoiceNumberAllocator
from .pdf_service import PdfService, PdfRenderOptions
from .logo_storage import LogoStorage

__all__ = [
    "UnitOfWork",
    "InvoiceServiceError",
    "NumberingFailed",
    "RenderFailed",
    "InvoiceNumberAllocator",
    "PdfService",
    "PdfRenderOptions",
    "LogoStorage",
]

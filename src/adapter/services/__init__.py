from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabPdfService
from .logo_storage import LocalLogoStorage

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabPdfService",
    "LocalLogoStorage",
]

"""Invoice service errors

Raised by services and translated into Result errors by use cases.
"""

from typing import Optional


class InvoiceServiceError(Exception):
    """Base class for invoice service failures"""

    code = "INVOICE_SERVICE_ERROR"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def reason(self) -> str:
        return str(self.cause) if self.cause is not None else self.message


class NumberingFailed(InvoiceServiceError):
    """The atomic counter increment could not complete"""

    code = "NUMBERING_FAILED"


class RenderFailed(InvoiceServiceError):
    """The PDF document could not be produced"""

    code = "RENDER_FAILED"

"""API error type and status mapping for use case errors"""

from fastapi import status
from libs.result import Error

# Failures of the system rather than of the request. Use cases report
# unexpected exceptions with a *_FAILED code.
SERVER_ERROR_SUFFIX = "_FAILED"
SERVER_ERROR_CODES = {"INVOICE_SERVICE_ERROR"}


class ClientError(Exception):
    """Raised by routes to return a use case Error as a JSON response"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    def to_response_body(self) -> dict:
        return {"error": {"code": self.error.code, "message": self.error.message}}


def status_code_for(error: Error) -> int:
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code.endswith(SERVER_ERROR_SUFFIX) or error.code in SERVER_ERROR_CODES:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def raise_client_error(error: Error) -> None:
    raise ClientError(error, status_code=status_code_for(error))

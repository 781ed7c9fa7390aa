"""Unit tests for mapping use case errors to HTTP status codes"""

import pytest

from libs.result import Error
from src.api.error import ClientError, raise_client_error, status_code_for


def make_error(code):
    return Error(code=code, message="Something happened", reason="cause")


@pytest.mark.parametrize(
    "code, expected",
    [
        ("INVOICE_NOT_FOUND", 404),
        ("CUSTOMER_NOT_FOUND", 404),
        ("NUMBERING_FAILED", 500),
        ("RENDER_FAILED", 500),
        ("CREATE_CUSTOMER_FAILED", 500),
        ("UPDATE_INVOICE_FAILED", 500),
        ("INVOICE_SERVICE_ERROR", 500),
        ("INVALID_TAX_RATE", 400),
    ],
)
def test_status_code_for(code, expected):
    assert status_code_for(make_error(code)) == expected


def test_raise_client_error_carries_status_and_body():
    with pytest.raises(ClientError) as exc_info:
        raise_client_error(make_error("CREATE_INVOICE_FAILED"))

    assert exc_info.value.status_code == 500
    assert exc_info.value.to_response_body() == {
        "error": {"code": "CREATE_INVOICE_FAILED", "message": "Something happened"}
    }

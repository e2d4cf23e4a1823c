"""Error Hierarchy - status codes and the {message, status, error} envelope.

Invariants:
    - to_response() always has exactly message, status="error", error
    - public_message (when set) is what the client reads first
"""

import re

from autoconnect.core.errors import (
    AdapterError,
    AutoConnectError,
    EmptyResultError,
    ErrorCategory,
    InvalidAmountError,
    InvalidInputError,
    InvalidResponseFormatError,
    PaymentSessionError,
    PersistenceError,
    RequestFailedError,
    RequiredFieldsMissingError,
    ResourceNotFoundError,
)


def test_required_fields_envelope_is_exact():
    err = RequiredFieldsMissingError(["name"])
    assert err.http_status == 400
    assert err.to_response() == {
        "message": "All required fields must be provided",
        "status": "error",
        "error": "Required fields missing",
    }


def test_not_found_carries_resource_id():
    err = ResourceNotFoundError("Bank account", "abc")
    assert err.http_status == 404
    assert err.context.resource_id == "abc"
    assert err.to_response()["message"] == "Bank account not found"
    assert err.to_response()["error"] == "Bank account 'abc' not found"


def test_persistence_error_hides_behind_unknown_server_error():
    err = PersistenceError("UNIQUE constraint failed: categories.categoryid", "insert")
    assert err.http_status == 500
    assert err.category == ErrorCategory.DATABASE
    assert err.to_response() == {
        "message": "Unknown server error",
        "status": "error",
        "error": "UNIQUE constraint failed: categories.categoryid",
    }


def test_adapter_client_errors_are_400():
    for err in (InvalidInputError(), EmptyResultError(), InvalidAmountError()):
        assert isinstance(err, AdapterError)
        assert err.http_status == 400


def test_llm_error_messages():
    assert re.search(r"invalid JSON", InvalidResponseFormatError("x").message)
    assert re.search(
        r"request failed: API Error", RequestFailedError("API Error").message,
    )


def test_payment_session_error_public_message():
    body = PaymentSessionError("Invalid currency").to_response()
    assert body["message"] == "Failed to create payment session"
    assert body["error"] == "Invalid currency"


def test_message_used_when_no_public_message():
    err = AutoConnectError("boom", "X", ErrorCategory.INTERNAL)
    assert err.to_response()["message"] == "boom"
    assert err.http_status == 500

"""Error Hierarchy - typed, categorized exceptions for every AutoConnect failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; persistence/adapter errors (500-level) are not
    - to_response() always yields the envelope {message, status: "error", error}
    - `message` is the human-readable summary; `error` carries the underlying failure text

Design Decisions:
    - Single hierarchy with AutoConnectError base: the global handler catches all of it
    - public_message separates what the client reads first from the raw failure text
      (e.g. "Unknown server error" + the driver's duplicate-key message)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error (never sent to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class AutoConnectError(Exception):
    """Base exception for all AutoConnect errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = public_message

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "message": self.public_message or self.message,
            "status": "error",
            "error": self.message,
        }


# ─── Validation Errors (400-level) ──────────────────────────────

class RequiredFieldsMissingError(AutoConnectError):
    """One or more required request fields are absent or empty."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Required fields missing", "REQUIRED_FIELDS_MISSING",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
            public_message="All required fields must be provided",
        )
        self.missing = missing


class InvalidFieldError(AutoConnectError):
    """A field is present but fails its type or enum contract."""
    def __init__(self, message: str, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
            public_message="Invalid request data",
        )
        self.fields = fields


class UploadRejectedError(AutoConnectError):
    """Uploaded file breaks the type or size rules."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UPLOAD_REJECTED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(AutoConnectError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
            public_message=f"{resource_type} not found",
        )
        self.resource_type = resource_type


# ─── Persistence Errors (500-level) ─────────────────────────────

class PersistenceError(AutoConnectError):
    """The persistence layer rejected a read or write."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
            public_message="Unknown server error",
        )
        self.operation = operation


# ─── Adapter Errors ─────────────────────────────────────────────

class AdapterError(AutoConnectError):
    """Base for failures raised by external-service adapters."""
    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 502,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        public_message: str | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.EXTERNAL_API, severity,
            context, http_status, public_message,
        )


class InvalidInputError(AdapterError):
    """OCR called without an input buffer."""
    def __init__(self, message: str = "No file uploaded", context: ErrorContext | None = None):
        super().__init__(message, "INVALID_INPUT", 400, ErrorSeverity.WARNING, context)


class EmptyResultError(AdapterError):
    """OCR returned no lines of text."""
    def __init__(self, message: str = "No text extracted", context: ErrorContext | None = None):
        super().__init__(message, "EMPTY_RESULT", 400, ErrorSeverity.WARNING, context)


class OcrProcessingError(AdapterError):
    """Vision API call failed, timed out, or returned nothing usable."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "OCR_PROCESSING_FAILED", 502, context=context)


class InvalidResponseFormatError(AdapterError):
    """LLM answered with something that is not JSON."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            f"LLM API returned invalid JSON: {detail}",
            "INVALID_RESPONSE_FORMAT", 502, context=context,
        )


class RequestFailedError(AdapterError):
    """LLM request failed in transport or upstream."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            f"LLM request failed: {detail}",
            "LLM_REQUEST_FAILED", 502, context=context,
        )


class InvalidAmountError(AdapterError):
    """Checkout amount is not a positive integer."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid amount value", "INVALID_AMOUNT", 400,
            ErrorSeverity.WARNING, context,
        )


class PaymentSessionError(AdapterError):
    """Payment processor refused or failed to create a checkout session."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PAYMENT_SESSION_FAILED", 500, ErrorSeverity.CRITICAL,
            context, public_message="Failed to create payment session",
        )


class MailDeliveryError(AdapterError):
    """A mail that the caller could not do without was not delivered."""
    def __init__(self, message: str, public_message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MAIL_DELIVERY_FAILED", 502, context=context,
            public_message=public_message,
        )


class BillProcessingError(AutoConnectError):
    """Unexpected failure while scanning and parsing a bill."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            detail, "BILL_PROCESSING_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context, 500,
            public_message="Failed to process bill",
        )

"""Error Hierarchy — typed, categorized exceptions for every registration failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors are 400-level; persistence errors are 500-level
    - to_response() produces the single-key REST envelope {"error": message}
    - Message text of validation errors is part of the API contract

Design Decisions:
    - Single hierarchy with InventoryError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields kept out of the response body
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


DECODE_ERROR_PREFIX = "failed to decode request body: "
EMPTY_PAYLOAD_REASON = "JSON payload is empty"

ID_FIELD = "id"
ATTRIBUTE_NAME_FIELD = "attributes[].name"

_MISSING_FIELD_MESSAGES = {
    ID_FIELD: "'id' field required",
    ATTRIBUTE_NAME_FIELD: "attribute 'name' field required",
}


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    PERSISTENCE = "persistence"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error, never rendered to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    device_id: str | None = None
    attribute_name: str | None = None
    debug_info: dict[str, Any] | None = None


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Validation Errors (400-level) ──────────────────────────────

class EmptyBodyError(InventoryError):
    """Request carried no payload."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            DECODE_ERROR_PREFIX + EMPTY_PAYLOAD_REASON,
            "EMPTY_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MalformedBodyError(InventoryError):
    """Payload is not valid JSON or a field has the wrong shape."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            DECODE_ERROR_PREFIX + reason,
            "MALFORMED_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


class MissingFieldError(InventoryError):
    """A required field is absent or empty."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            _MISSING_FIELD_MESSAGES.get(field, f"'{field}' field required"),
            "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class InvalidAttributeValueError(InventoryError):
    """Attribute value is not a string, number, or homogeneous list of either."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "invalid attribute value provided",
            "INVALID_ATTRIBUTE_VALUE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Persistence Errors (500-level) ─────────────────────────────

class PersistenceError(InventoryError):
    """Persistence capability failed; message forwarded verbatim."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PERSISTENCE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.ERROR, context, 500,
        )


class DatabaseError(InventoryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

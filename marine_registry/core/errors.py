"""Error Hierarchy - typed, categorized exceptions for all registry failure modes.

Invariants:
    - Every error has a code (str), kind (str), category, severity and http_status
    - Domain errors (400-level) are expected results; infrastructure errors are critical
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MarineRegistryError base: one FastAPI handler catches all
    - kind mirrors the public error taxonomy (NotFound, InvalidPayload) so clients
      can branch on it without parsing codes
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    record_id: str | None = None


class MarineRegistryError(Exception):
    """Base exception for all registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "kind": self.kind,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "record_id": self.context.record_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(MarineRegistryError):
    """Referenced id is absent from the relevant store."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        operation: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.record_id = resource_id
        message = f"{resource_type} with id={resource_id} not found"
        if operation:
            message = f"cannot {operation}: {message}"
        super().__init__(
            message, "NOT_FOUND", "NotFound",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidPayloadError(MarineRegistryError):
    """Input to a create or update operation is empty or malformed."""
    def __init__(
        self,
        message: str = "invalid payload",
        fields: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_PAYLOAD", "InvalidPayload",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 400,
        )
        self.fields = fields or []


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MarineRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", "DatabaseError", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation

"""Error Hierarchy — typed exceptions for every ordering failure mode.

Invariants:
    - Each subclass fixes its code, category, severity and HTTP status at class level
    - Not-found (404) and storage failure (500) are distinct classes, never conflated
    - to_response() yields the single JSON envelope used by every error response
    - Messages are safe to show to clients; driver details stay in the logs

Design Decisions:
    - Class attributes over per-instance constructor arguments: a subclass is
      fully described by its declaration, and raising one needs only a message
    - ErrorContext carries resource/operation metadata for logs and clients
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where the error happened: resource, operation, and optional debug data."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class OrderingError(Exception):
    """Base exception for all ordering service errors."""

    code: str = "INTERNAL_ERROR"
    category: ErrorCategory = ErrorCategory.INTERNAL
    severity: ErrorSeverity = ErrorSeverity.ERROR
    http_status: int = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """REST error envelope: {"error": {code, message, ..., context}}."""
        ctx = self.context
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": ctx.timestamp.isoformat(),
                "context": {
                    "resource_type": ctx.resource_type,
                    "resource_id": ctx.resource_id,
                    "operation": ctx.operation,
                },
            }
        }


# ─── 400-level ───────────────────────────────────────────────────

class _FieldValidationError(OrderingError):
    category = ErrorCategory.VALIDATION
    http_status = 400

    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(message, context)
        self.field = field


class ScheduleValidationError(_FieldValidationError):
    """Opening-hours configuration is malformed (raised at write time only)."""
    code = "SCHEDULE_VALIDATION_ERROR"


class OrderValidationError(_FieldValidationError):
    """Order lines reference unknown, unavailable, or mismatched catalog entries."""
    code = "ORDER_VALIDATION_ERROR"


class ResourceNotFoundError(OrderingError):
    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        context = context or ErrorContext()
        context.resource_type = resource_type
        context.resource_id = resource_id
        super().__init__(f"{resource_type} '{resource_id}' not found", context)


class AuthenticationError(OrderingError):
    """Missing, invalid, or expired credentials."""
    code = "AUTHENTICATION_FAILED"
    category = ErrorCategory.AUTHENTICATION
    severity = ErrorSeverity.WARNING
    http_status = 401

    def __init__(self, message: str = "Invalid credentials", context: ErrorContext | None = None):
        super().__init__(message, context)


class PermissionDeniedError(OrderingError):
    code = "PERMISSION_DENIED"
    category = ErrorCategory.AUTHORIZATION
    severity = ErrorSeverity.WARNING
    http_status = 403

    def __init__(self, required_role: str, context: ErrorContext | None = None):
        super().__init__(f"This operation requires the '{required_role}' role", context)
        self.required_role = required_role


class ConflictError(OrderingError):
    """Write clashes with existing data (unique names, rows still referenced)."""
    code = "CONFLICT"
    category = ErrorCategory.CONFLICT
    http_status = 409


# ─── 500-level ───────────────────────────────────────────────────

class DatabaseError(OrderingError):
    """A storage statement or transaction failed. The cause is opaque to clients."""
    code = "DATABASE_ERROR"
    category = ErrorCategory.DATABASE
    severity = ErrorSeverity.CRITICAL
    http_status = 500

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        context = context or ErrorContext()
        context.operation = operation
        super().__init__(f"Database {operation} failed: {message}", context)
        self.operation = operation

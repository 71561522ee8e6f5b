"""Error Hierarchy: typed, categorized exceptions for every employee API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client-input errors are 400-level; upstream and data faults are 429/500-level
    - to_response() produces the REST envelope consumed by api/error_handlers.py
    - Not-found is never raised from core or services; routes build its envelope

Design Decisions:
    - Single hierarchy with EmployeeApiError base: one global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    DATA_INTEGRITY = "data_integrity"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context carried alongside an error for logs and response bodies."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    employee_id: str | None = None
    upstream_status: int | None = None
    retry_after_ms: int | None = None
    debug_info: dict[str, Any] | None = None


class EmployeeApiError(Exception):
    """Base exception for all employee API errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "employee_id": self.context.employee_id,
                    "retry_after_ms": self.context.retry_after_ms,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class EmployeeValidationError(EmployeeApiError):
    """Create-employee input failed one or more rules.

    `violations` keeps the individual fragments; `message` is their
    space-joined concatenation.
    """
    def __init__(self, violations: list[str], context: ErrorContext | None = None):
        super().__init__(
            " ".join(violations), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = list(violations)


class MissingEmployeeNameError(EmployeeApiError):
    """Resolved employee has no name, so the name-keyed delete cannot run."""
    def __init__(self, employee_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            f"Employee '{employee_id}' has no name to delete by",
            "MISSING_EMPLOYEE_NAME", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )


class ResourceNotFoundError(EmployeeApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.employee_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Upstream & Data Errors (429/500-level) ─────────────────────

class RateLimitedError(EmployeeApiError):
    """Upstream answered 429 Too Many Requests."""
    def __init__(
        self,
        message: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        super().__init__(
            message, "RATE_LIMITED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, ctx, 429,
        )


class UpstreamFailureError(EmployeeApiError):
    """Upstream failed for any reason other than rate limiting."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UPSTREAM_FAILURE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DataIntegrityError(EmployeeApiError):
    """Upstream record violates a data invariant (e.g. non-integer salary)."""
    def __init__(
        self, message: str, field_name: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "DATA_INTEGRITY_ERROR", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.field_name = field_name

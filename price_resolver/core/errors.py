"""Error Hierarchy — typed, categorized exceptions for all price service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are the caller's fault; infrastructure errors (500-level) are critical
    - "No price applies" is NOT an error in core: resolve returns None;
      PriceNotFoundError exists only for the HTTP layer
    - to_response() produces the REST envelope, never internal details

Design Decisions:
    - Single hierarchy with PriceServiceError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: int | None = None
    brand_id: int | None = None
    application_date: datetime | None = None
    debug_info: dict[str, Any] | None = None


class PriceServiceError(Exception):
    """Base exception for all price service errors."""

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
        application_date = self.context.application_date
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "product_id": self.context.product_id,
                    "brand_id": self.context.brand_id,
                    "application_date": (
                        application_date.isoformat() if application_date else None
                    ),
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidQueryError(PriceServiceError):
    """Resolution called with a missing or malformed argument."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_QUERY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidPriceError(PriceServiceError):
    """Price record violates an entity invariant."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_PRICE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.field = field


class PriceNotFoundError(PriceServiceError):
    """No price applies to the requested product, brand and date."""
    def __init__(
        self,
        product_id: int,
        brand_id: int,
        application_date: datetime,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        ctx.brand_id = brand_id
        ctx.application_date = application_date
        super().__init__(
            f"No price found for product {product_id}, brand {brand_id} "
            f"at {application_date.isoformat()}",
            "PRICE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PriceServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation

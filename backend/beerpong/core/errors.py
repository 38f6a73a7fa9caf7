"""Error Hierarchy — typed, categorized exceptions for every throw/cup failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors are 400-level and happen before any external call
    - Collaborator errors are 500-level (503 when the cache is absent)
    - Policy denial is a 403 with INFO severity: a business outcome, not a fault
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BeerPongError base: one FastAPI handler catches all
    - ErrorContext as dataclass: carries user/cup identifiers for logging
      without coupling to the logging framework
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
    AUTHORIZATION = "authorization"
    CACHE = "cache"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    cup_id: str | None = None
    debug_info: dict[str, Any] | None = None


class BeerPongError(Exception):
    """Base exception for all beerpong errors."""

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
                    "user_id": self.context.user_id,
                    "cup_id": self.context.cup_id,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class BodyReadError(BeerPongError):
    """Request body could not be read from the connection."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to read request body",
            "BODY_READ_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidPayloadError(BeerPongError):
    """Body is not a JSON object with string fields."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request payload",
            "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingFieldsError(BeerPongError):
    """One or more required throw fields are empty."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing request fields: {', '.join(missing)}",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.missing = missing


# ─── Authorization Outcome (403) ────────────────────────────────

class AccessDeniedError(BeerPongError):
    """Policy-decision point answered 'not permitted'."""
    def __init__(self, cup_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.cup_id = cup_id
        super().__init__(
            "Access denied!",
            "ACCESS_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.INFO, ctx, 403,
        )


# ─── Collaborator Errors (500-level) ────────────────────────────

class CacheUnavailableError(BeerPongError):
    """Cache client failed to initialize at startup."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Service unavailable",
            "CACHE_UNAVAILABLE", ErrorCategory.CACHE,
            ErrorSeverity.CRITICAL, context, 503,
        )


class CacheWriteError(BeerPongError):
    """Cache write raised or timed out."""
    def __init__(self, key: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"key": key, "reason": reason}
        super().__init__(
            "Internal server error",
            "CACHE_WRITE_FAILED", ErrorCategory.CACHE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.key = key
        self.reason = reason


class PolicyClientUnavailableError(BeerPongError):
    """Policy-decision client was never constructed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Policy client failed initialization",
            "POLICY_CLIENT_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )


class PolicyCheckError(BeerPongError):
    """Permission check failed (transport, timeout, non-2xx, malformed reply)."""
    def __init__(
        self, reason: str, error_type: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"reason": reason, "error_type": error_type}
        category = (
            ErrorCategory.TIMEOUT if error_type == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            "Permission check failed",
            "POLICY_CHECK_FAILED", category,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.reason = reason
        self.error_type = error_type

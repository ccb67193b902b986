"""Error Hierarchy — typed, categorized exceptions for every portal failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry a short human-readable message
    - Server errors (500-level) expose only public_message; the detailed
      message stays in the server log
    - to_response() produces the {success: false, error, code} envelope

Design Decisions:
    - Single hierarchy with PortalError base: one handler renders all of them
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    service: str | None = None
    debug_info: dict[str, Any] | None = None


class PortalError(Exception):
    """Base exception for all portal errors."""

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
        self.public_message = public_message or message

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "success": False,
            "error": self.public_message,
            "code": self.code,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class UnauthenticatedError(PortalError):
    """No session, or the session token could not be verified."""
    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(PortalError):
    """Valid session whose role does not grant access."""
    def __init__(
        self, message: str = "Forbidden - Admin access required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class RequestValidationFailed(PortalError):
    """Required field missing or malformed."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(PortalError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"{resource_type} not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type


class ConflictError(PortalError):
    """Resource already exists."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class ServiceUnavailableError(PortalError):
    """External provider not configured on this server."""
    def __init__(self, service: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.service = service
        super().__init__(
            f"{service} is not available",
            "SERVICE_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 503,
        )


class UpstreamServiceError(PortalError):
    """Third-party API call failed (transport error or non-2xx status)."""
    def __init__(
        self,
        service: str,
        message: str,
        public_message: str = "Upstream service request failed",
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.service = service
        ctx.debug_info = {"status_code": status_code}
        super().__init__(
            f"{service} error: {message}",
            "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 500,
            public_message=public_message,
        )
        self.service = service
        self.status_code = status_code


class DatabaseError(PortalError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
            public_message="Internal server error",
        )
        self.operation = operation

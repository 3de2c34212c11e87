"""Error Hierarchy — typed, categorized exceptions for every Users API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error knows its HTTP status; to_response() is always {"error": <message>}
    - Client errors (400/404) carry fixed public messages
    - Store errors keep operation and cause for logging, expose only a generic message

Design Decisions:
    - Single hierarchy with UsersApiError base: one FastAPI handler covers all
    - DatabaseError is also used as a value (QueryResult.error), not only raised
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for log routing."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


INTERNAL_ERROR_MESSAGE = "Internal server error"


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the service's REST error envelope."""
        return {"error": self.message}

    def describe(self) -> str:
        """Internal description for logs."""
        return f"{self.code}: {self.message}"


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(UsersApiError):
    """User payload is missing name or email."""
    def __init__(self, issue: str | None = None):
        super().__init__(
            "Name and email are required",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.issue = issue


class UserNotFoundError(UsersApiError):
    """Targeted user row does not exist."""
    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.user_id = user_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UsersApiError):
    """Store call failed. The cause is logged, never returned to clients."""
    def __init__(self, operation: str, cause: BaseException | None = None):
        super().__init__(
            INTERNAL_ERROR_MESSAGE,
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
        self.cause = cause

    def describe(self) -> str:
        """Internal description for logs: operation plus the store's own message."""
        if self.cause is None:
            return f"Database {self.operation} failed"
        return f"Database {self.operation} failed: {type(self.cause).__name__}: {self.cause}"

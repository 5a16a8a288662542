"""Error Hierarchy — typed, categorized exceptions for all Exercise Tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are terminal for the request, never retried
    - Store errors (500-level) never leak internal details: the client sees "server error"
    - to_response() produces the REST envelope {"error": <message>}

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: FastAPI global handler catches all
    - UnknownUserError is 400, not 404: clients treat an unknown userId as bad input
"""

from enum import Enum


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
    INTERNAL = "internal"


SERVER_ERROR_MESSAGE = "server error"


class ExerciseTrackerError(Exception):
    """Base exception for all Exercise Tracker errors."""

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
        """Convert to standardized REST error response."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(ExerciseTrackerError):
    """Required field missing/blank, or a number that does not parse."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class UnknownUserError(ExerciseTrackerError):
    """Referenced user id does not exist."""
    def __init__(self, user_id: str):
        super().__init__(
            "unknown userId", "UNKNOWN_USER", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 400,
        )
        self.user_id = user_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(ExerciseTrackerError):
    """Persistence failure. detail is logged, never returned."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            SERVER_ERROR_MESSAGE, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.detail = f"Store {operation} failed: {detail}"
        self.operation = operation


class MalformedIdError(StoreError):
    """Identifier is not in the store's id format."""
    def __init__(self, raw_id: str):
        super().__init__(f"malformed id {raw_id!r}", "lookup")
        self.raw_id = raw_id

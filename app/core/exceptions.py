"""
Domain exceptions.

Services raise these; ``app.api.exception_handlers`` turns them into
JSON error responses. Each exception carries:

- a human-readable message,
- an error code for API responses,
- the HTTP status code it maps to,
- optional details (e.g. per-field messages).
"""

from enum import Enum
from typing import Any, Dict, Optional, Sequence


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


class LedgerError(Exception):
    """Base exception for all cledger errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class NotFoundError(LedgerError):
    """Raised when a referenced id does not exist."""

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        super().__init__(
            message=f"{resource_type} not found: {resource_id}",
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details={"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class InvalidInputError(LedgerError):
    """Raised when a payload breaks a vocabulary or non-blank rule.

    ``violations`` is a sequence of objects with ``field`` and ``message``
    attributes; the first one becomes the headline message.
    """

    def __init__(self, violations: Sequence[Any], message: Optional[str] = None) -> None:
        self.violations = list(violations)
        fields = {v.field: v.message for v in self.violations}
        headline = message or (self.violations[0].message if self.violations else "Invalid input")
        super().__init__(
            message=headline,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details={"fields": fields} if fields else None,
        )

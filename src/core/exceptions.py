"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400/422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class UserNotFoundError(AppException):
    """User profile not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class ProfileValidationError(AppException):
    """Profile update rejected by validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=422,
            details={"field": field} if field else None,
        )


# --- Client-side failures reported by the remote profile service ---


class FailureKind(StrEnum):
    """Category of a failed call to the remote profile service."""

    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    NETWORK = "network"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation"
    MALFORMED = "malformed"


class ProfileServiceError(Exception):
    """A fetch or patch call against the profile service did not succeed.

    ``status_text`` carries the HTTP reason phrase when the service answered
    with a non-success status. It is ``None`` for transport-level failures,
    where only ``message`` is available.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str = "",
        status_code: int | None = None,
        status_text: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(message)

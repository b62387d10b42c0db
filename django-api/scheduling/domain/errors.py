"""Domain error codes for the scheduling module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_SESSION_ID = "INVALID_SESSION_ID"
    INVALID_SESSION_FIELD = "INVALID_SESSION_FIELD"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidSessionIdError(DomainError):
    """Raised when a session id does not parse as a session key."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SESSION_ID,
            message="Invalid session ID format",
        )
        object.__setattr__(self, "session_id", session_id)


class InvalidSessionFieldError(DomainError):
    """Raised when an edit targets a field that cannot be edited."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SESSION_FIELD,
            message="Session field cannot be edited",
        )
        object.__setattr__(self, "field", field)

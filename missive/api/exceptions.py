"""API exception hierarchy for consistent error handling.

All API exceptions inherit from MissiveAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses.
"""

from missive.api.models.errors import ErrorCode
from missive.records.errors import CrudError


class MissiveAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EngineNotConfiguredError(MissiveAPIError):
    """Raised when no engine can be deployed or restored."""

    status_code = 503
    error_code = ErrorCode.SERVICE_UNAVAILABLE


class SnapshotWriteError(MissiveAPIError):
    """Raised when engine state could not be persisted."""

    status_code = 503
    error_code = ErrorCode.SERVICE_UNAVAILABLE


class AuthNotConfiguredError(MissiveAPIError):
    """Raised when no JWT secret is available to verify callers."""

    status_code = 503
    error_code = ErrorCode.SERVICE_UNAVAILABLE


# HTTP status and message for each engine failure
CRUD_ERROR_STATUS: dict[CrudError, tuple[int, str]] = {
    CrudError.YOU_ALREADY_CREATED_A_MESSAGE: (409, "You already created a message"),
    CrudError.SENDER_NOT_FOUND: (404, "No message stored for this sender"),
    CrudError.YOUR_MESSAGE_IS_EMPTY: (422, "Your message is empty"),
    CrudError.YOUR_MESSAGE_IS_TOO_SHORT: (422, "Your message is too short"),
    CrudError.NO_MESSAGE_YET: (404, "No message yet"),
    CrudError.YOUR_MESSAGE_IS_THE_SAME_AS_BEFORE: (409, "Your message is the same as before"),
    CrudError.OWNER_ONLY: (403, "Only the owner can read history"),
}

"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses.

    Engine failures reuse the CrudError values so clients see the same
    code the engine returned.
    """

    YOU_ALREADY_CREATED_A_MESSAGE = "YouAlreadyCreatedAMessage"
    SENDER_NOT_FOUND = "SenderNotFound"
    YOUR_MESSAGE_IS_EMPTY = "YourMessageIsEmpty"
    YOUR_MESSAGE_IS_TOO_SHORT = "YourMessageIsTooShort"
    NO_MESSAGE_YET = "NoMessageYet"
    YOUR_MESSAGE_IS_THE_SAME_AS_BEFORE = "YourMessageIsTheSameAsBefore"
    OWNER_ONLY = "OwnerOnly"

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, missing fields, etc.)."""

    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    """The engine is not configured."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation failures."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    """Machine-readable error code."""

    message: str
    """Human-readable error message."""

    details: list[ErrorDetail] | None = None
    """Additional error details for validation failures."""


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "SenderNotFound",
                "message": "No message stored for this sender"
            }
        }
    """

    error: ErrorBody

"""CRUD error taxonomy and operation results.

Engine operations never raise for expected failures. Each returns a
CrudResult carrying either a value or one CrudError. Callers that prefer
exceptions can call `unwrap()`, which raises CrudOperationError.
"""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class CrudError(str, Enum):
    """Closed set of user-facing operation failures."""

    YOU_ALREADY_CREATED_A_MESSAGE = "YouAlreadyCreatedAMessage"
    """Create called by an identity that already holds a record."""

    SENDER_NOT_FOUND = "SenderNotFound"
    """Read, update or delete referencing an identity with no record."""

    YOUR_MESSAGE_IS_EMPTY = "YourMessageIsEmpty"
    """Create or update with zero-length text."""

    YOUR_MESSAGE_IS_TOO_SHORT = "YourMessageIsTooShort"
    """Create or update with text below the minimum length."""

    NO_MESSAGE_YET = "NoMessageYet"
    """Read-all while no identity holds a record."""

    YOUR_MESSAGE_IS_THE_SAME_AS_BEFORE = "YourMessageIsTheSameAsBefore"
    """Update with text identical to the stored text."""

    OWNER_ONLY = "OwnerOnly"
    """History read by a caller other than the owner."""


class CrudOperationError(Exception):
    """Raised by `CrudResult.unwrap()` for a failed result."""

    def __init__(self, error: CrudError) -> None:
        self.error = error
        super().__init__(error.value)


class CrudResult(BaseModel, Generic[T]):
    """Outcome of a single engine operation."""

    value: T | None = None
    error: CrudError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "CrudResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CrudError) -> "CrudResult[T]":
        return cls(error=error)

    def unwrap(self) -> T | None:
        """Return the value, raising CrudOperationError on failure."""
        if self.error is not None:
            raise CrudOperationError(self.error)
        return self.value

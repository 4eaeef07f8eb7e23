"""RecordStore abstract interface."""

from abc import ABC, abstractmethod

from missive.records.models import IdentityKey


class RecordStore(ABC):
    """Abstract interface for current message storage.

    Holds at most one message per identity and keeps the sender roster,
    the insertion-ordered list of identities currently holding a record.
    Implementations perform no validation and keep no history.
    """

    @abstractmethod
    def contains(self, sender: IdentityKey) -> bool:
        """Check whether an identity holds a record."""
        pass

    @abstractmethod
    def get(self, sender: IdentityKey) -> str | None:
        """Get the current message for an identity."""
        pass

    @abstractmethod
    def put(self, sender: IdentityKey, message: str) -> None:
        """Insert or overwrite a record.

        A previously absent identity is appended to the roster; an
        overwrite keeps its roster position.
        """
        pass

    @abstractmethod
    def remove(self, sender: IdentityKey) -> None:
        """Remove a record and its roster entry. No-op if absent."""
        pass

    @abstractmethod
    def senders(self) -> list[IdentityKey]:
        """List identities holding a record, in insertion order."""
        pass

    def __len__(self) -> int:
        return len(self.senders())

"""In-memory implementation of RecordStore."""

from missive.records.models import IdentityKey
from missive.records.store import RecordStore


class InMemoryRecordStore(RecordStore):
    """In-memory implementation of RecordStore.

    A single insertion-ordered dict serves as both the mapping and the
    roster, so roster membership always matches the stored records.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._messages: dict[IdentityKey, str] = {}

    def contains(self, sender: IdentityKey) -> bool:
        """Check whether an identity holds a record."""
        return sender in self._messages

    def get(self, sender: IdentityKey) -> str | None:
        """Get the current message for an identity."""
        return self._messages.get(sender)

    def put(self, sender: IdentityKey, message: str) -> None:
        """Insert or overwrite a record."""
        self._messages[sender] = message

    def remove(self, sender: IdentityKey) -> None:
        """Remove a record. No-op if absent."""
        self._messages.pop(sender, None)

    def senders(self) -> list[IdentityKey]:
        """List identities holding a record, in insertion order."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

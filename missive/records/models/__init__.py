"""Record domain models.

Contains all Pydantic models for the record store:
- IdentityKey for callers and record keys
- MessageRecord for current messages
- UpdateEntry and DeleteEntry for the history ledgers
- Domain events emitted on successful mutations
"""

from missive.records.models.entries import DeleteEntry, MessageRecord, UpdateEntry
from missive.records.models.events import (
    DomainEvent,
    MessageCreated,
    MessageDeleted,
    MessageUpdated,
)
from missive.records.models.identity import IdentityKey

__all__ = [
    # Identity
    "IdentityKey",
    # Records and ledger entries
    "MessageRecord",
    "UpdateEntry",
    "DeleteEntry",
    # Events
    "DomainEvent",
    "MessageCreated",
    "MessageUpdated",
    "MessageDeleted",
]

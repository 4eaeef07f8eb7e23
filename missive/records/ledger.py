"""Append-only history ledger."""

from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import BaseModel

EntryT = TypeVar("EntryT", bound=BaseModel)


class HistoryLedger(Generic[EntryT]):
    """Append-only, insertion-ordered log of ledger entries.

    Entries are frozen models, so a snapshot list returned by `all()`
    can be handed out without exposing the ledger to mutation. There is
    no size cap and no deduplication.
    """

    def __init__(self, entries: Iterable[EntryT] = ()) -> None:
        self._entries: list[EntryT] = list(entries)

    def append(self, entry: EntryT) -> None:
        """Append an entry. Never fails, never removes prior entries."""
        self._entries.append(entry)

    def all(self) -> list[EntryT]:
        """Return a copy of every entry in append order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

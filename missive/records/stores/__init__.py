"""Record stores."""

from missive.records.store import RecordStore
from missive.records.stores.inmemory import InMemoryRecordStore

__all__ = [
    "RecordStore",
    "InMemoryRecordStore",
]

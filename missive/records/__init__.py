"""Record domain: message store, history ledgers, and the CRUD engine.

Usage:
    from missive.records import CrudEngine, IdentityKey

    engine = CrudEngine.deploy(IdentityKey("alice"))
    engine.create_message(IdentityKey("bob"), "hello from bob")
"""

from missive.records.engine import CrudEngine
from missive.records.errors import CrudError, CrudOperationError, CrudResult
from missive.records.models import (
    DeleteEntry,
    IdentityKey,
    MessageCreated,
    MessageDeleted,
    MessageRecord,
    MessageUpdated,
    UpdateEntry,
)

__all__ = [
    "CrudEngine",
    "CrudError",
    "CrudOperationError",
    "CrudResult",
    "DeleteEntry",
    "IdentityKey",
    "MessageCreated",
    "MessageDeleted",
    "MessageRecord",
    "MessageUpdated",
    "UpdateEntry",
]

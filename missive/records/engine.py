"""CRUD engine: the public operations over the record store and ledgers.

Every operation receives the caller identity from the execution
environment, validates before mutating, and returns a CrudResult. Each
call runs to completion synchronously, so a caller never observes a
partially applied operation.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from missive.observability import metrics
from missive.observability.logging import get_logger
from missive.records.access import require_owner
from missive.records.errors import CrudError, CrudResult
from missive.records.ledger import HistoryLedger
from missive.records.models import (
    DeleteEntry,
    DomainEvent,
    IdentityKey,
    MessageCreated,
    MessageDeleted,
    MessageRecord,
    MessageUpdated,
    UpdateEntry,
)
from missive.records.snapshot import EngineSnapshot
from missive.records.store import RecordStore
from missive.records.stores.inmemory import InMemoryRecordStore
from missive.runtime.clock import Clock, SystemClock
from missive.runtime.events import EventSink, NullEventSink

logger = get_logger(__name__)

SEED_MESSAGE = "I created my CRUD contract"
MIN_MESSAGE_LENGTH = 10


def message_length(text: str) -> int:
    """Length of a message in UTF-8 bytes."""
    return len(text.encode("utf-8"))


class CrudEngine:
    """Owns the record store, both ledgers and the owner identity.

    Build one with `deploy()` for a fresh system or `from_snapshot()` to
    resume persisted state. Nothing outside the engine mutates its state.
    """

    def __init__(
        self,
        owner: IdentityKey,
        store: RecordStore,
        updates: HistoryLedger[UpdateEntry],
        deletions: HistoryLedger[DeleteEntry],
        *,
        clock: Clock | None = None,
        sink: EventSink | None = None,
        min_message_length: int = MIN_MESSAGE_LENGTH,
    ) -> None:
        self._owner = owner
        self._store = store
        self._updates = updates
        self._deletions = deletions
        self._clock = clock or SystemClock()
        self._sink = sink or NullEventSink()
        self._min_message_length = min_message_length
        self._pending: list[DomainEvent] | None = None
        self._publish_sizes()

    @classmethod
    def deploy(
        cls,
        creator: IdentityKey,
        *,
        seed_message: str = SEED_MESSAGE,
        store: RecordStore | None = None,
        clock: Clock | None = None,
        sink: EventSink | None = None,
        min_message_length: int = MIN_MESSAGE_LENGTH,
    ) -> "CrudEngine":
        """Create a fresh engine owned by `creator`.

        The creator becomes the owner and the sole initial record holder
        with the seed message. Ledgers start empty and no event is emitted.
        """
        store = store if store is not None else InMemoryRecordStore()
        store.put(creator, seed_message)

        logger.info("engine_deployed", owner=creator)

        return cls(
            owner=creator,
            store=store,
            updates=HistoryLedger(),
            deletions=HistoryLedger(),
            clock=clock,
            sink=sink,
            min_message_length=min_message_length,
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: EngineSnapshot,
        *,
        store: RecordStore | None = None,
        clock: Clock | None = None,
        sink: EventSink | None = None,
        min_message_length: int = MIN_MESSAGE_LENGTH,
    ) -> "CrudEngine":
        """Rebuild an engine from persisted state."""
        store = store if store is not None else InMemoryRecordStore()
        for record in snapshot.messages:
            store.put(record.sender, record.message)

        logger.info(
            "engine_restored",
            owner=snapshot.owner,
            messages=len(snapshot.messages),
            updates=len(snapshot.updates),
            deletions=len(snapshot.deletions),
        )

        return cls(
            owner=snapshot.owner,
            store=store,
            updates=HistoryLedger(snapshot.updates),
            deletions=HistoryLedger(snapshot.deletions),
            clock=clock,
            sink=sink,
            min_message_length=min_message_length,
        )

    @property
    def owner(self) -> IdentityKey:
        return self._owner

    def snapshot(self) -> EngineSnapshot:
        """Capture the complete current state."""
        return EngineSnapshot(
            owner=self._owner,
            messages=self._records(),
            updates=self._updates.all(),
            deletions=self._deletions.all(),
        )

    @contextmanager
    def staged(self) -> Iterator[None]:
        """Apply operations tentatively.

        Events raised inside the block are held back. If the block raises,
        the state captured on entry is restored and the held events are
        dropped; otherwise the events are delivered on exit.
        """
        if self._pending is not None:
            raise RuntimeError("Engine is already staging operations")

        before = self.snapshot()
        self._pending = []
        try:
            yield
        except BaseException:
            self._pending = None
            self._restore(before)
            logger.debug("staged_operations_rolled_back", owner=self._owner)
            raise

        pending, self._pending = self._pending, None
        for event in pending:
            self._emit(event)

    # Mutations
    def create_message(self, caller: IdentityKey, message: str) -> CrudResult[None]:
        """Create the caller's record.

        The existence check runs before the length checks, so an existing
        holder always sees YOU_ALREADY_CREATED_A_MESSAGE.
        """
        if self._store.contains(caller):
            return self._reject("create_message", caller, CrudError.YOU_ALREADY_CREATED_A_MESSAGE)

        error = self._validate_text(message)
        if error is not None:
            return self._reject("create_message", caller, error)

        self._store.put(caller, message)
        self._emit(MessageCreated(sender=caller, message=message))
        return self._accept("create_message", caller, CrudResult[None].success())

    def update_message(self, caller: IdentityKey, new_message: str) -> CrudResult[None]:
        """Replace the caller's record and log the change."""
        current = self._store.get(caller)
        if current is None:
            return self._reject("update_message", caller, CrudError.SENDER_NOT_FOUND)

        error = self._validate_text(new_message)
        if error is not None:
            return self._reject("update_message", caller, error)

        if current == new_message:
            return self._reject(
                "update_message", caller, CrudError.YOUR_MESSAGE_IS_THE_SAME_AS_BEFORE
            )

        self._updates.append(
            UpdateEntry(
                sender=caller,
                old_message=current,
                new_message=new_message,
                timestamp=self._clock.now(),
            )
        )
        self._store.put(caller, new_message)
        self._emit(MessageUpdated(sender=caller, new_message=new_message))
        return self._accept("update_message", caller, CrudResult[None].success())

    def delete_message(self, caller: IdentityKey) -> CrudResult[None]:
        """Remove the caller's record and log it."""
        current = self._store.get(caller)
        if current is None:
            return self._reject("delete_message", caller, CrudError.SENDER_NOT_FOUND)

        self._deletions.append(
            DeleteEntry(sender=caller, message=current, timestamp=self._clock.now())
        )
        self._store.remove(caller)
        self._emit(MessageDeleted(sender=caller))
        return self._accept("delete_message", caller, CrudResult[None].success())

    # Reads
    def read_message_from(self, sender: IdentityKey) -> CrudResult[str]:
        """Get the current message held by `sender`."""
        message = self._store.get(sender)
        if message is None:
            return CrudResult[str].failure(CrudError.SENDER_NOT_FOUND)
        return CrudResult[str].success(message)

    def read_all_messages(self) -> CrudResult[list[MessageRecord]]:
        """List every current record in roster order."""
        if len(self._store) == 0:
            return CrudResult[list[MessageRecord]].failure(CrudError.NO_MESSAGE_YET)
        return CrudResult[list[MessageRecord]].success(self._records())

    def get_update_history(self, caller: IdentityKey) -> CrudResult[list[UpdateEntry]]:
        """Owner-only: every update entry in append order."""
        error = require_owner(caller, self._owner)
        if error is not None:
            return self._reject("get_update_history", caller, error)
        return CrudResult[list[UpdateEntry]].success(self._updates.all())

    def get_delete_history(self, caller: IdentityKey) -> CrudResult[list[DeleteEntry]]:
        """Owner-only: every delete entry in append order."""
        error = require_owner(caller, self._owner)
        if error is not None:
            return self._reject("get_delete_history", caller, error)
        return CrudResult[list[DeleteEntry]].success(self._deletions.all())

    # Internals
    def _validate_text(self, message: str) -> CrudError | None:
        length = message_length(message)
        if length == 0:
            return CrudError.YOUR_MESSAGE_IS_EMPTY
        if length < self._min_message_length:
            return CrudError.YOUR_MESSAGE_IS_TOO_SHORT
        return None

    def _records(self) -> list[MessageRecord]:
        # Senders without a stored message are skipped rather than failing the read
        records = []
        for sender in self._store.senders():
            message = self._store.get(sender)
            if message is not None:
                records.append(MessageRecord(sender=sender, message=message))
        return records

    def _restore(self, snapshot: EngineSnapshot) -> None:
        for sender in self._store.senders():
            self._store.remove(sender)
        for record in snapshot.messages:
            self._store.put(record.sender, record.message)
        self._updates = HistoryLedger(snapshot.updates)
        self._deletions = HistoryLedger(snapshot.deletions)
        self._publish_sizes()

    def _emit(self, event: DomainEvent) -> None:
        if self._pending is not None:
            self._pending.append(event)
            return
        try:
            self._sink.emit(event)
        except Exception as e:
            logger.warning(
                "event_emit_failed",
                event_type=event.event_type,
                sender=event.sender,
                error=str(e),
            )

    def _accept(self, operation: str, caller: IdentityKey, result: CrudResult) -> CrudResult:
        logger.debug("operation_completed", operation=operation, caller=caller)
        metrics.record_operation(operation, "ok")
        self._publish_sizes()
        return result

    def _reject(self, operation: str, caller: IdentityKey, error: CrudError) -> CrudResult:
        logger.info(
            "operation_rejected",
            operation=operation,
            caller=caller,
            error_code=error.value,
        )
        metrics.record_operation(operation, error.value)
        return CrudResult.failure(error)

    def _publish_sizes(self) -> None:
        metrics.set_state_sizes(
            messages=len(self._store),
            updates=len(self._updates),
            deletions=len(self._deletions),
        )

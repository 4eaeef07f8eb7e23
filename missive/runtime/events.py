"""Event sinks for domain events.

The engine hands every successful mutation's event to one injected sink.
Delivery is fire-and-forget: a sink failure never fails the operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

from missive.observability.logging import get_logger

if TYPE_CHECKING:
    from missive.records.models import DomainEvent

logger = get_logger(__name__)


class EventSink(ABC):
    """Receiver for domain events."""

    @abstractmethod
    def emit(self, event: DomainEvent) -> None:
        """Deliver one event."""
        pass


class NullEventSink(EventSink):
    """Discards every event."""

    def emit(self, event: DomainEvent) -> None:
        pass


class RecordingEventSink(EventSink):
    """Keeps emitted events in memory, in emission order."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def emit(self, event: DomainEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


class LoggingEventSink(EventSink):
    """Writes one structured log line per event.

    Only the event type and sender are logged, never message bodies.
    """

    def emit(self, event: DomainEvent) -> None:
        logger.info(event.event_type, sender=event.sender)


class FanOutEventSink(EventSink):
    """Forwards each event to several sinks.

    A failing sink is logged and skipped; the remaining sinks still
    receive the event.
    """

    def __init__(self, sinks: Iterable[EventSink]) -> None:
        self._sinks = list(sinks)

    def emit(self, event: DomainEvent) -> None:
        for sink in self._sinks:
            try:
                sink.emit(event)
            except Exception as e:
                logger.warning(
                    "event_sink_failed",
                    sink=type(sink).__name__,
                    event_type=event.event_type,
                    error=str(e),
                )

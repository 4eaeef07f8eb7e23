"""Runtime collaborators consumed by the engine: clock and event sinks."""

from missive.runtime.clock import Clock, ManualClock, SystemClock
from missive.runtime.events import (
    EventSink,
    FanOutEventSink,
    LoggingEventSink,
    NullEventSink,
    RecordingEventSink,
)

__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "EventSink",
    "FanOutEventSink",
    "LoggingEventSink",
    "NullEventSink",
    "RecordingEventSink",
]

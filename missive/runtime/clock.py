"""Clock collaborators.

Ledger timestamps are integer milliseconds since the Unix epoch and
must never decrease between calls.
"""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of ledger timestamps."""

    @abstractmethod
    def now(self) -> int:
        """Return the current instant in epoch milliseconds."""
        pass


class SystemClock(Clock):
    """Wall clock clamped so it never goes backwards."""

    def __init__(self) -> None:
        self._last = 0

    def now(self) -> int:
        current = time.time_ns() // 1_000_000
        if current < self._last:
            current = self._last
        self._last = current
        return current


class ManualClock(Clock):
    """Settable clock for tests and replays."""

    def __init__(self, start: int = 0) -> None:
        self._now = start

    def now(self) -> int:
        return self._now

    def set(self, value: int) -> None:
        """Move the clock to an absolute instant.

        Raises:
            ValueError: If the instant is earlier than the current one
        """
        if value < self._now:
            raise ValueError(f"Clock cannot move backwards: {value} < {self._now}")
        self._now = value

    def advance(self, millis: int) -> int:
        """Move the clock forward and return the new instant."""
        self.set(self._now + millis)
        return self._now

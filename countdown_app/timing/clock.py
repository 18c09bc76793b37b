"""Wall clocks used by the countdown."""

from abc import ABC, abstractmethod
from datetime import datetime

from ..utils.time import from_timestamp_ms, now_ms


class Clock(ABC):
    """Source of the current time in epoch milliseconds."""

    @abstractmethod
    def now_ms(self) -> float:
        """Return the current time in epoch milliseconds."""
        pass

    def now(self) -> datetime:
        """Return the current time as a UTC datetime."""
        return from_timestamp_ms(self.now_ms())


class SystemClock(Clock):
    """Clock backed by the system wall clock."""

    def now_ms(self) -> float:
        return now_ms()


class ManualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = float(start_ms)

    def now_ms(self) -> float:
        return self._now_ms

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("cannot move a clock backwards")
        self._now_ms += seconds * 1000

    def set(self, timestamp_ms: float) -> None:
        self._now_ms = float(timestamp_ms)

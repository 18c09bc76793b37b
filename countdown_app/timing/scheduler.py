"""
Cancellable delayed calls.

Schedulers run their callbacks on the thread that drives them, so every
callback re-enters the state machine from the same single thread that owns
it. There is no background thread.
"""

import heapq
import itertools
import sched
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..logging.config import get_logger
from .clock import ManualClock

logger = get_logger(__name__)


class ScheduledCall:
    """Handle for a single delayed callback."""

    def __init__(self, delay_seconds: float, callback: Callable[..., Any],
                 args: tuple = ()) -> None:
        self.delay_seconds = delay_seconds
        self._callback = callback
        self._args = args
        self._cancelled = False
        self._fired = False
        self._on_cancel: Optional[Callable[[], None]] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._fired)

    def cancel(self) -> bool:
        """Cancel the call. Returns False if it already ran or was cancelled."""
        if not self.pending:
            return False

        self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()
        return True

    def _run(self) -> None:
        if not self.pending:
            return
        self._fired = True
        self._callback(*self._args)


class Scheduler(ABC):
    """Schedules callbacks after a delay."""

    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[..., Any],
                   *args: Any) -> ScheduledCall:
        """Run ``callback(*args)`` once after ``delay_seconds``."""
        pass


class LoopScheduler(Scheduler):
    """Blocking scheduler built on the standard library ``sched`` module."""

    def __init__(self, timefunc: Callable[[], float] = time.monotonic,
                 delayfunc: Callable[[float], Any] = time.sleep) -> None:
        self._scheduler = sched.scheduler(timefunc, delayfunc)

    def call_later(self, delay_seconds: float, callback: Callable[..., Any],
                   *args: Any) -> ScheduledCall:
        call = ScheduledCall(delay_seconds, callback, args)
        event = self._scheduler.enter(delay_seconds, 0, call._run)

        def _remove() -> None:
            try:
                self._scheduler.cancel(event)
            except ValueError:
                # Already popped from the queue by run()
                pass

        call._on_cancel = _remove
        return call

    @property
    def empty(self) -> bool:
        return self._scheduler.empty()

    def run(self) -> None:
        """Run scheduled calls until the queue is empty."""
        self._scheduler.run()

    def stop(self) -> None:
        """Drop every queued call so that ``run`` returns."""
        for event in list(self._scheduler.queue):
            try:
                self._scheduler.cancel(event)
            except ValueError:
                pass
        logger.debug("Loop scheduler stopped")


class ManualScheduler(Scheduler):
    """
    Scheduler driven by explicit ``advance`` calls.

    When given a ManualClock, the clock is moved to each call's due time
    before the call runs, so callbacks observe consistent time.
    """

    def __init__(self, clock: Optional[ManualClock] = None) -> None:
        self._clock = clock
        self._time = 0.0
        self._queue: list[tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    @property
    def time(self) -> float:
        """Seconds elapsed since the scheduler was created."""
        return self._time

    @property
    def pending(self) -> list[ScheduledCall]:
        return [call for _, _, call in sorted(self._queue) if call.pending]

    def call_later(self, delay_seconds: float, callback: Callable[..., Any],
                   *args: Any) -> ScheduledCall:
        if delay_seconds < 0:
            raise ValueError("delay must not be negative")

        call = ScheduledCall(delay_seconds, callback, args)
        heapq.heappush(self._queue, (self._time + delay_seconds, next(self._counter), call))
        return call

    def advance(self, seconds: float) -> int:
        """
        Move time forward, running every call that falls due.

        Calls scheduled by callbacks run in the same pass if they fall due
        before the new time.

        Returns:
            Number of callbacks that ran
        """
        target = self._time + seconds
        ran = 0

        while self._queue and self._queue[0][0] <= target:
            due, _, call = heapq.heappop(self._queue)
            if not call.pending:
                continue
            self._move_to(due)
            call._run()
            ran += 1

        self._move_to(target)
        return ran

    def _move_to(self, new_time: float) -> None:
        if self._clock is not None and new_time > self._time:
            self._clock.advance(new_time - self._time)
        self._time = max(self._time, new_time)

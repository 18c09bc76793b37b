"""
Clocks and schedulers.

The countdown reads time from a Clock and re-arms itself through a
Scheduler. Manual variants let tests and demos drive time explicitly.
"""
from .clock import Clock, ManualClock, SystemClock
from .scheduler import LoopScheduler, ManualScheduler, ScheduledCall, Scheduler

__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "LoopScheduler",
    "ManualScheduler",
    "ScheduledCall",
    "Scheduler",
]

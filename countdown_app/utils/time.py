"""
Time conversion utilities for countdown targets.

Targets travel through inputs as ``datetime`` objects (or raw millisecond
timestamps); the countdown compares them against the clock in epoch
milliseconds. Values that cannot be converted yield NaN so that callers can
reject them with a single ``math.isnan`` check.
"""

import math
import time
from datetime import datetime, timezone
from typing import Any

# Units walked from the finest to the coarsest; a modulus of 0 keeps the rest.
REMAINING_UNITS: tuple[tuple[str, int], ...] = (
    ("second", 60),
    ("minute", 60),
    ("hour", 24),
    ("day", 0),
)

# Largest distance from the epoch a target may have, as for JavaScript dates.
MAX_TIMESTAMP_MS = 8.64e15


def now_ms() -> float:
    """Current wall-clock time in epoch milliseconds."""
    return time.time() * 1000


def to_timestamp_ms(value: Any) -> float:
    """
    Convert a target date to epoch milliseconds.

    Args:
        value: ``datetime`` (naive values are local time) or a number of
            milliseconds since the epoch

    Returns:
        Milliseconds since the epoch, or NaN when the value is not a date
        or lies more than ``MAX_TIMESTAMP_MS`` away from the epoch
    """
    if isinstance(value, datetime):
        try:
            timestamp = value.timestamp() * 1000
        except (OverflowError, OSError, ValueError):
            return math.nan
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            timestamp = float(value)
        except OverflowError:
            return math.nan
    else:
        return math.nan

    if not math.isfinite(timestamp) or abs(timestamp) > MAX_TIMESTAMP_MS:
        return math.nan
    return timestamp


def from_timestamp_ms(timestamp_ms: float) -> datetime:
    """Convert epoch milliseconds to a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def js_round(value: float) -> int:
    """Round half up, the way ``Math.round`` does (``round`` is half-even)."""
    return math.floor(value + 0.5)


def seconds_until(target_ms: float, current_ms: float) -> int:
    """Whole seconds left until the target, rounded half up."""
    return js_round((target_ms - current_ms) / 1000)


def remaining_parts(diff: int) -> dict[str, int]:
    """
    Split a number of seconds into day/hour/minute/second parts.

    Units are filled from seconds upwards. The first unit whose modulus is
    zero or larger than what is left takes the whole remaining value and the
    walk stops there, so coarser units are omitted.

    >>> remaining_parts(90061)
    {'second': 1, 'minute': 1, 'hour': 1, 'day': 1}
    >>> remaining_parts(45)
    {'second': 45}

    Args:
        diff: Seconds remaining

    Returns:
        Mapping of unit name to value, finest unit first
    """
    remaining: dict[str, int] = {}
    current = diff

    for unit, modulus in REMAINING_UNITS:
        if not modulus or modulus > current:
            remaining[unit] = current
            break

        remaining[unit] = current % modulus
        current = current // modulus

    return remaining

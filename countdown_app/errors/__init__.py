"""
Error classification for the countdown state machine.

Engine contract violations are unrecoverable system failures. Date entry
problems are recoverable and are turned into ``error`` inputs before they
reach the machine.
"""

from .date_entry import (
    DateEntryError,
    MalformedDateError,
    InvalidDateError,
)
from .system_failures import (
    SystemFailureError,
    InvalidInputError,
    StateTransitionError,
    TransitionLoopError,
    PersistenceError,
    ConfigurationError,
)

__all__ = [
    # Date entry errors
    "DateEntryError",
    "MalformedDateError",
    "InvalidDateError",
    # System failures
    "SystemFailureError",
    "InvalidInputError",
    "StateTransitionError",
    "TransitionLoopError",
    "PersistenceError",
    "ConfigurationError",
]

"""
System failure error classifications for unrecoverable errors.

These exceptions represent programmer errors or broken collaborators. They
always propagate to the caller of the state machine.
"""

from typing import Any, Dict, List, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidInputError(SystemFailureError):
    """A value passed to the machine is not an {id, parameters} input."""

    def __init__(self, message: str, received: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.received = received


class StateTransitionError(SystemFailureError):
    """Invalid use of the state machine that would corrupt its state."""

    def __init__(self, message: str, current_state: Optional[str] = None,
                 attempted_transition: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state
        self.attempted_transition = attempted_transition


class TransitionLoopError(StateTransitionError):
    """Handlers kept transitioning (or nesting dispatches) past the guard."""

    def __init__(self, message: str, input_id: Optional[str] = None,
                 limit: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.input_id = input_id
        self.limit = limit


class PersistenceError(SystemFailureError):
    """Date store backend failures."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target


class ConfigurationError(SystemFailureError):
    """Configuration file or overrides failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []

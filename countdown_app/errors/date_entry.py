"""
Date entry error classifications.

Raised while parsing user supplied date strings. The date entry surface
converts them into ``error`` inputs, so they never cross the engine.
"""

from typing import Optional, Dict, Any


class DateEntryError(Exception):
    """Base class for date entry problems that can be shown to the user."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedDateError(DateEntryError):
    """Text does not follow the expected yyyy-mm-dd layout."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InvalidDateError(DateEntryError):
    """Text is well formed but names a day that does not exist."""

    def __init__(self, message: str, raw_data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data

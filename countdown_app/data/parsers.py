"""
Parsers for user supplied date strings.

Dates are entered as ``yyyy-mm-dd`` and mean local midnight of that day.
"""

import re
from datetime import datetime

from ..errors import InvalidDateError, MalformedDateError

DATE_ENTRY_FORMAT = "yyyy-mm-dd"
DATE_ENTRY_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def parse_date_entry(text: str) -> datetime:
    """
    Parse a ``yyyy-mm-dd`` string into a naive local datetime at midnight.

    Raises:
        MalformedDateError: text does not follow the yyyy-mm-dd layout
        InvalidDateError: the layout is right but the day does not exist
    """
    match = DATE_ENTRY_PATTERN.fullmatch(text.strip())
    if match is None:
        raise MalformedDateError(
            f"Expected a {DATE_ENTRY_FORMAT} date, got {text!r}",
            raw_data=text,
            expected_format=DATE_ENTRY_FORMAT
        )

    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"{text!r} is not a calendar date: {e}", raw_data=text) from e

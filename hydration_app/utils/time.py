"""
Calendar date helpers for day-boundary handling.

Day boundaries follow the local calendar date. Dates travel through the
system as zero-padded ``YYYY-MM-DD`` keys so that equality of keys is
equality of days.
"""

import re
from datetime import date, datetime
from typing import Optional, Union

DATE_KEY_FORMAT = "%Y-%m-%d"

_DATE_KEY_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def get_date_key(value: Optional[Union[date, datetime]] = None) -> str:
    """
    Build the date key for a date, a datetime or the current local day.

    Args:
        value: Date or datetime to convert, defaults to now (local time)

    Returns:
        Zero-padded ``YYYY-MM-DD`` string with no time component
    """
    if value is None:
        value = date.today()
    elif isinstance(value, datetime):
        value = value.date()

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(key: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` key back into a date.

    Raises:
        ValueError: If the key is not a zero-padded, real calendar date
    """
    if not isinstance(key, str) or not _DATE_KEY_PATTERN.match(key):
        raise ValueError(f"Invalid date key: {key!r}")

    return datetime.strptime(key, DATE_KEY_FORMAT).date()


def is_date_key(key: object) -> bool:
    """Check whether a value is a valid date key."""
    try:
        parse_date_key(key)  # type: ignore[arg-type]
    except ValueError:
        return False
    return True

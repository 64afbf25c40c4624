"""Date formatting utilities for iCalendar output."""

from datetime import date, datetime
from typing import Callable, Optional, Union

from dateutil import parser as date_parser

from .exceptions import InvalidDateError

DateLike = Union[datetime, date, str, int, float]

DATE_FORMAT = "%Y%m%d"
DATE_TIME_FORMAT = "%Y%m%dT%H%M%S"


def parse_date_like(value: DateLike) -> datetime:
    """
    Normalize a date-like value to a datetime.

    Args:
        value: datetime, date (taken as midnight), date string, or epoch
            timestamp in milliseconds (local time)

    Returns:
        Parsed datetime

    Raises:
        InvalidDateError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        raise InvalidDateError(f"Not a date: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidDateError(f"Epoch value out of range: {value!r}") from e
    if isinstance(value, str):
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise InvalidDateError(f"Unparsable date string: {value!r}") from e
    raise InvalidDateError(f"Unsupported date type: {type(value).__name__}")


def format_date(value: DateLike, full_day: bool) -> str:
    """
    Format a date-like value as an iCalendar DATE or DATE-TIME token.

    Timezone-aware values are rendered by their wall-clock fields, without
    conversion and without a UTC suffix.
    """
    dt = parse_date_like(value)
    return dt.strftime(DATE_FORMAT if full_day else DATE_TIME_FORMAT)


def format_timestamp(clock: Optional[Callable[[], datetime]] = None) -> str:
    """DTSTAMP token for the current local time."""
    now = clock() if clock else datetime.now()
    return now.strftime(DATE_TIME_FORMAT)

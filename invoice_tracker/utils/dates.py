"""
Date helpers for invoice records.

Input dates are parsed leniently (python-dateutil) and normalised to aware
datetimes in the server's local timezone when no offset is given. Output dates
are rendered as YYYY-MM-DD in local time.

The "expiring soon" check runs on the already formatted value. A bare
YYYY-MM-DD is read as UTC midnight of that day, the way a browser Date reads a
date-only string; other values are compared as the instant they describe.
"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Callable, List, Optional, TypeVar, Union

from dateutil import parser as dateutil_parser

from invoice_tracker.errors import ValidationError

INVALID_DATE = "Invalid Date"
EXPIRING_SOON_WINDOW = timedelta(days=1)
_BARE_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateInput = Union[str, datetime, None]
T = TypeVar("T")


def parse_date(value: DateInput) -> datetime:
    """
    Parse a client or stored date into an aware datetime.

    Args:
        value: ISO-8601 string, free-form date string, or datetime

    Returns:
        Timezone-aware datetime (local timezone if the input had none)

    Raises:
        ValidationError: If the value is missing or cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        if value is None or not str(value).strip():
            raise ValidationError("Invalid date format.")
        try:
            parsed = dateutil_parser.parse(str(value))
        except (ValueError, OverflowError) as e:
            raise ValidationError("Invalid date format.") from e

    if parsed.tzinfo is None:
        try:
            parsed = parsed.astimezone()
        except (ValueError, OverflowError, OSError) as e:
            raise ValidationError("Invalid date format.") from e

    return parsed


def format_date(value: DateInput) -> str:
    """Render a date as YYYY-MM-DD in local time, or "Invalid Date"."""
    try:
        local = parse_date(value).astimezone()
    except (ValidationError, ValueError, OverflowError, OSError):
        return INVALID_DATE

    return f"{local.year}-{local.month:02d}-{local.day:02d}"


def _expiry_instant(value: DateInput) -> datetime:
    if isinstance(value, str) and _BARE_DATE.match(value.strip()):
        try:
            day = date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError("Invalid date format.") from e
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)

    return parse_date(value)


def is_expiring_soon(expiry_date: DateInput, now: Optional[datetime] = None) -> bool:
    """
    True when the expiry falls within the next 24 hours (inclusive on both ends).

    A bare YYYY-MM-DD counts from UTC midnight of that day. Unparsable values
    are never expiring soon.
    """
    try:
        expiry = _expiry_instant(expiry_date)
    except ValidationError:
        return False

    current = now if now is not None else datetime.now().astimezone()
    if current.tzinfo is None:
        current = current.astimezone()

    remaining = expiry - current
    return timedelta(0) <= remaining <= EXPIRING_SOON_WINDOW


def sort_expiring_first(
    items: List[T],
    expiry_of: Callable[[T], DateInput],
    now: Optional[datetime] = None,
) -> List[T]:
    """
    Move expiring-soon items ahead of the rest, keeping relative order otherwise.

    `now` is sampled once so every item is judged against the same instant.
    """
    current = now if now is not None else datetime.now().astimezone()
    # sorted() is stable: False (soon) sorts before True (not soon)
    return sorted(items, key=lambda item: not is_expiring_soon(expiry_of(item), current))

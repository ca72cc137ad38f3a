"""
Parse-and-validate helpers for loosely typed client input.

Form posts deliver every field as text, so durations, dates and
limits arrive as strings.  Each helper either returns a typed value or
raises ``InvalidFieldError`` carrying a message that is safe to send
back to the client.
"""

from datetime import date, datetime
from typing import Optional

# Rendering used in every exercise and log response, e.g. "Mon Jan 01 2024".
CALENDAR_DATE_FORMAT = "%a %b %d %Y"

# Range of an SQLite INTEGER column.
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1

# Text formats accepted besides ISO 8601.
_DATE_FORMATS = (
    CALENDAR_DATE_FORMAT,
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


class InvalidFieldError(ValueError):
    """Raised when a request field cannot be coerced to its type."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _check_bounds(field: str, value: int) -> int:
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        raise InvalidFieldError(field, f"{field} is out of range")
    return value


def parse_duration(value) -> int:
    """Coerce a duration in minutes to ``int``.

    Accepts integers and integer strings (surrounding whitespace is
    ignored).  Booleans, floats with a fractional part, anything
    non-numeric and values outside SQLite's 64-bit INTEGER range are
    rejected.
    """
    message = "duration must be an integer"
    if isinstance(value, bool):
        raise InvalidFieldError("duration", message)
    if isinstance(value, int):
        return _check_bounds("duration", value)
    if isinstance(value, float) and value.is_integer():
        return _check_bounds("duration", int(value))
    try:
        duration = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidFieldError("duration", message) from None
    return _check_bounds("duration", duration)


def parse_date(value: str, field: str = "date") -> date:
    """Parse caller supplied text into a calendar date.

    ISO dates (``2024-01-31``) and ISO datetimes (the time part is
    dropped) are tried first, then the human readable formats in
    ``_DATE_FORMATS``.
    """
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InvalidFieldError(field, f"{field} must be a valid date")


def parse_optional_date(value: Optional[str], field: str) -> Optional[date]:
    if _blank(value):
        return None
    return parse_date(value, field)


def parse_limit(value: Optional[str]) -> Optional[int]:
    """Parse the ``limit`` query parameter.

    Blank means no limit, as does ``0``.  Negative or non-integer
    values are rejected.
    """
    if _blank(value):
        return None
    try:
        limit = int(str(value).strip())
    except ValueError:
        raise InvalidFieldError("limit", "limit must be a non-negative integer") from None
    if limit < 0:
        raise InvalidFieldError("limit", "limit must be a non-negative integer")
    return _check_bounds("limit", limit) or None


def format_calendar_date(value: date) -> str:
    # %Y is not zero-padded below year 1000 on every platform.
    return f"{value:%a %b %d} {value.year:04d}"

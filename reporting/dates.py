"""Date parsing and moment-style date formatting.

Report documents carry dates as loosely-typed values (ISO strings, free-form
strings, epoch milliseconds) and display patterns written with moment.js
tokens such as `YYYY-MM-DD` or `MMM YYYY`. These helpers never raise on bad
input; unparseable values come back as None.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time
from typing import Final

from dateutil import parser as date_parser

_PARSE_DEFAULT: Final[datetime] = datetime(2000, 1, 1)

_MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\[[^\]]*\]|YYYY|YY|Q|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|HH|H|hh|h|mm|m|ss|s|A|a"
)


def parse_date_like(value: object) -> datetime | None:
    """Parse a date-like value into a naive datetime.

    Args:
        value: A `datetime`, `date`, date string, or epoch milliseconds.

    Returns:
        Naive datetime (timezone-aware inputs are converted to UTC first), or
        None when the value cannot be interpreted as a date.
    """

    if isinstance(value, datetime):
        return _naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=UTC).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return _naive(date_parser.parse(text, default=_PARSE_DEFAULT))
        except (OverflowError, ValueError):
            return None
    return None


def format_date(moment: datetime, pattern: str | None) -> str:
    """Format a datetime with a moment-style pattern.

    Args:
        moment: Datetime to format.
        pattern: Pattern using moment tokens; text inside `[...]` is literal.
            When empty, the ISO date (`YYYY-MM-DD`) is returned.

    Returns:
        Formatted string.
    """

    if not pattern:
        return moment.date().isoformat()
    return _TOKEN_PATTERN.sub(lambda match: _format_token(moment, match.group(0)), pattern)


def _naive(moment: datetime) -> datetime:
    """Drop timezone information after normalizing to UTC."""

    if moment.tzinfo is None:
        return moment
    return moment.astimezone(UTC).replace(tzinfo=None)


def _format_token(moment: datetime, token: str) -> str:
    """Render a single moment token."""

    if token.startswith("["):
        return token[1:-1]
    if token == "YYYY":
        return f"{moment.year:04d}"
    if token == "YY":
        return f"{moment.year % 100:02d}"
    if token == "Q":
        return str((moment.month - 1) // 3 + 1)
    if token == "MMMM":
        return _MONTH_NAMES[moment.month - 1]
    if token == "MMM":
        return _MONTH_NAMES[moment.month - 1][:3]
    if token == "MM":
        return f"{moment.month:02d}"
    if token == "M":
        return str(moment.month)
    if token == "Do":
        return _ordinal(moment.day)
    if token == "DD":
        return f"{moment.day:02d}"
    if token == "D":
        return str(moment.day)
    if token == "dddd":
        return _WEEKDAY_NAMES[moment.weekday()]
    if token == "ddd":
        return _WEEKDAY_NAMES[moment.weekday()][:3]
    if token == "HH":
        return f"{moment.hour:02d}"
    if token == "H":
        return str(moment.hour)
    if token == "hh":
        return f"{(moment.hour % 12) or 12:02d}"
    if token == "h":
        return str((moment.hour % 12) or 12)
    if token == "mm":
        return f"{moment.minute:02d}"
    if token == "m":
        return str(moment.minute)
    if token == "ss":
        return f"{moment.second:02d}"
    if token == "s":
        return str(moment.second)
    if token == "A":
        return "PM" if moment.hour >= 12 else "AM"
    if token == "a":
        return "pm" if moment.hour >= 12 else "am"
    return token


def _ordinal(day: int) -> str:
    """Return `day` with its English ordinal suffix (1st, 2nd, 11th...)."""

    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"

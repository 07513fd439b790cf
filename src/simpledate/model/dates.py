"""Date parsing and checking helpers.

Two kinds of parsing live here and are kept separate:

* parse_date() is best-effort. It tries the strict YYYY-MM-DD format first and
  then falls back to relative keywords and dateutil's permissive parser.
* is_valid_iso_date() is authoritative. A string passes only if re-rendering
  the parsed date reproduces it exactly.
"""

import calendar
import datetime
import logging
import re
from collections.abc import Callable
from typing import Optional

import dateutil.parser
from dateutil import relativedelta


ISO_FORMAT = "%Y-%m-%d"

Clock = Callable[[], datetime.datetime]
"""Returns the reference time for relative and partial date parsing."""
DaysInMonth = Callable[[int, int], int]
"""Maps (year, month) to the number of days in that month."""

logger = logging.getLogger(__name__)

_KEYWORD_OFFSETS = {
    "now": 0,
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}
_OFFSET_PATTERN = re.compile(
    r"^(?P<amount>[+-]?\d+)\s*(?P<unit>day|week|month|year)s?(?P<ago>\s+ago)?$"
)
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def days_in_month(year: int, month: int) -> int:
    """Number of days in a Gregorian month, accounting for leap years."""
    return calendar.monthrange(year, month)[1]


def is_valid_iso_date(value: object) -> bool:
    """True if value is a YYYY-MM-DD string for a real calendar date."""
    if not isinstance(value, str):
        return False
    parsed = parse_strict(value)
    return parsed is not None and parsed.isoformat() == value


def parse_strict(value: str) -> Optional[datetime.date]:
    """Parse a YYYY-MM-DD string, returning None on failure."""
    try:
        return datetime.datetime.strptime(value, ISO_FORMAT).date()
    except ValueError:
        return None


def parse_relative(value: str, now: datetime.datetime) -> Optional[datetime.date]:
    """Parse expressions such as 'tomorrow', '+1 week' or '3 days ago'."""
    text = " ".join(value.lower().split())
    if text in _KEYWORD_OFFSETS:
        return now.date() + datetime.timedelta(days=_KEYWORD_OFFSETS[text])
    match = _OFFSET_PATTERN.match(text)
    if match is None:
        return None
    amount = int(match["amount"])
    if match["ago"]:
        amount = -amount
    delta = relativedelta.relativedelta(**{f"{match['unit']}s": amount})
    try:
        return now.date() + delta
    except (ValueError, OverflowError):
        return None


def parse_fallback(value: str, now: datetime.datetime) -> Optional[datetime.date]:
    """Parse free-form dates relative to now."""
    relative = parse_relative(value, now)
    if relative is not None:
        return relative
    try:
        return dateutil.parser.parse(value, default=now).date()
    except (ValueError, OverflowError) as err:
        logger.debug("Unable to parse %r as a date: %s", value, err)
        return None


def parse_date(
    value: "str | datetime.date | None", clock: Clock = datetime.datetime.now
) -> Optional[datetime.date]:
    """Interpret value as a date, or return None.

    Strings are parsed strictly as YYYY-MM-DD first. If that fails, relative
    expressions and dateutil's parser are tried, with missing components
    taken from clock().
    """
    if not value:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    value = str(value).strip()
    parsed = parse_strict(value)
    if parsed is None:
        logger.debug("Falling back to permissive parsing for %r", value)
        parsed = parse_fallback(value, clock())
    return parsed


def pad_left(value: str, width: int, filler: str) -> str:
    """Left-pad value with filler to width characters.

    The filler is extended with zeros to the full width and only as much of
    it as needed is used, so pad_left("5", 4, "19") is "1905" and
    pad_left("85", 4, "19") is "1985". Values at or over width are returned
    unchanged.

    This is deliberately not repeat-padding: repeating "19" would turn "5"
    into "1915" and "" into "1919".
    """
    if len(value) >= width:
        return value
    return filler.ljust(width, "0")[: width - len(value)] + value


def leading_int(value: Optional[str]) -> int:
    """Integer from the leading digits of value. Non-numeric values give 0."""
    if not value:
        return 0
    match = _LEADING_INT_PATTERN.match(value)
    return int(match.group(1)) if match else 0


def to_iso(date: datetime.date) -> str:
    """Format a date as a zero-padded YYYY-MM-DD string."""
    return date.isoformat()

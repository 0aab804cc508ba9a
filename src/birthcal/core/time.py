from __future__ import annotations
import calendar as pycal
import re
from datetime import date, datetime
from typing import Optional, Tuple, Union

from .errors import InvalidDateError
from .types import TimeOfDay

DateLike = Union[date, datetime]

_YMD_RE = re.compile(r"^\s*(\d{1,4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?\s*$")
_HMS_RE = re.compile(r"^\s*(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?\s*$")


def parse_ymd(s: str) -> Tuple[int, int, int]:
    """
    Strictly split a "Y-M-D" string into integers.

    No calendar validation happens here; a trailing ISO time part
    ("2000-03-10T00:00:00.000Z") is dropped.
    """
    m = _YMD_RE.match(s) if isinstance(s, str) else None
    if m is None:
        raise InvalidDateError(f"Expected a Y-M-D date string, got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))

def parse_solar(s: str) -> date:
    y, m, d = parse_ymd(s)
    try:
        return date(y, m, d)
    except ValueError as e:
        raise InvalidDateError(f"{s!r} is not a Gregorian date: {e}") from e

def parse_time_of_day(s: Optional[str]) -> Optional[TimeOfDay]:
    """Parse "HH:MM" or "HH:MM:SS"; None and "" mean no time of day."""
    if s is None or s == "":
        return None
    m = _HMS_RE.match(s)
    if m is None:
        raise InvalidDateError(f"Expected HH:MM[:SS], got {s!r}")
    h, mi, sec = int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)
    if not (0 <= h < 24 and 0 <= mi < 60 and 0 <= sec < 60):
        raise InvalidDateError(f"Time of day out of range: {s!r}")
    return TimeOfDay(h, mi, sec)

def parse_instant(s: str) -> datetime:
    """ISO date or date-time, as used on the command line."""
    try:
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise InvalidDateError(f"Expected an ISO date or date-time, got {s!r}") from e

def date_only(t: DateLike) -> date:
    if isinstance(t, datetime):
        return t.date()
    return t

def as_datetime(t: DateLike) -> datetime:
    """Dates become midnight; datetimes lose tzinfo and sub-second precision."""
    if isinstance(t, datetime):
        return t.replace(microsecond=0, tzinfo=None)
    return datetime(t.year, t.month, t.day)

def at_time(d: date, tod: Optional[TimeOfDay]) -> datetime:
    if tod is None:
        return datetime(d.year, d.month, d.day)
    return datetime(d.year, d.month, d.day, tod.hour, tod.minute, tod.second)

def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def day_diff(later: DateLike, earlier: DateLike) -> int:
    """Whole calendar days between two dates, ignoring time of day."""
    return to_jdn(date_only(later)) - to_jdn(date_only(earlier))

def days_in_previous_month(year: int, month: int) -> int:
    """Length of the month immediately before (year, month)."""
    if month == 1:
        return 31
    return pycal.monthrange(year, month - 1)[1]

def anniversary(year: int, month: int, day: int) -> date:
    """Gregorian anniversary; 29 February falls on 1 March in common years."""
    if month == 2 and day == 29 and not pycal.isleap(year):
        return date(year, 3, 1)
    return date(year, month, day)

def add_months(d: date, months: int) -> date:
    """Calendar month addition, clamping the day to the target month's length."""
    total = d.year * 12 + (d.month - 1) + months
    y, m = divmod(total, 12)
    last = pycal.monthrange(y, m + 1)[1]
    return date(y, m + 1, min(d.day, last))

"""
birthcal.duration
-----------------
Calendar-aware elapsed time.

`decompose` subtracts two civil instants field by field and borrows from the
smallest unit upward, so "1 month" is one civil month rather than 30 days.
Day borrows use the length of the month preceding the later instant's month;
when the start day does not exist in that month, days count from its last day.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from .core.converter import LunarConverter
from .core.errors import ReferenceBeforeBirthError
from .core.time import DateLike, as_datetime, at_time, date_only, day_diff, days_in_previous_month
from .core.types import DetailedAge, ResolvedBirth, TimeOfDay
from .occurrence import lunar_anniversary


def decompose(start: DateLike, end: DateLike) -> DetailedAge:
    """Elapsed years..seconds from `start` to `end` (dates are taken at midnight)."""
    a = as_datetime(start)
    b = as_datetime(end)
    if b < a:
        raise ReferenceBeforeBirthError(f"End instant {b.isoformat()} precedes start {a.isoformat()}")

    years = b.year - a.year
    months = b.month - a.month
    days = b.day - a.day
    hours = b.hour - a.hour
    minutes = b.minute - a.minute
    seconds = b.second - a.second

    if seconds < 0:
        seconds += 60
        minutes -= 1
    if minutes < 0:
        minutes += 60
        hours -= 1
    if hours < 0:
        hours += 24
        days -= 1
    if days < 0:
        prev = days_in_previous_month(b.year, b.month)
        days += prev
        if days < 0:
            # Start day missing from the borrowed month: count from its last day.
            days += a.day - prev
        months -= 1
    if months < 0:
        months += 12
        years -= 1

    return DetailedAge(years, months, days, hours, minutes, seconds)

def _check_born(birth: ResolvedBirth, today: date) -> None:
    if today < birth.solar_date:
        raise ReferenceBeforeBirthError(f"Reference date {today.isoformat()} precedes birth {birth.solar_date.isoformat()}")

def solar_whole_year_age(birth: ResolvedBirth, reference: DateLike) -> int:
    return decompose(birth.solar_date, date_only(reference)).years

def lunar_whole_year_age(birth: ResolvedBirth, reference: DateLike, *, converter: LunarConverter) -> int:
    """Counts lunar-year boundaries: the age goes up on the lunar birthday."""
    today = date_only(reference)
    _check_born(birth, today)
    ref_year = converter.solar_to_lunar(today).year
    years = ref_year - birth.lunar.year
    if lunar_anniversary(birth, ref_year, converter=converter) > today:
        years -= 1
    return years

def whole_year_age(
    birth: ResolvedBirth,
    is_lunar: bool,
    reference: DateLike,
    *,
    converter: LunarConverter,
) -> int:
    if is_lunar:
        return lunar_whole_year_age(birth, reference, converter=converter)
    return solar_whole_year_age(birth, reference)

def detailed_age(birth: ResolvedBirth, birth_time: Optional[TimeOfDay], reference: DateLike) -> DetailedAge:
    """Full decomposition from the solar birth date at its time of day (midnight if unknown)."""
    return decompose(at_time(birth.solar_date, birth_time), reference)

def total_days_lived(birth: ResolvedBirth, reference: DateLike) -> int:
    today = date_only(reference)
    _check_born(birth, today)
    return day_diff(today, birth.solar_date)

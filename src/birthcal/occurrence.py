"""
birthcal.occurrence
-------------------
Next calendar occurrence of a birthday, in the calendar it was recorded in.

"Next" is a date-level notion: a reference falling on the birthday date is
day 0 even when the birth time of day has already passed.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from .core.converter import LunarConverter
from .core.time import DateLike, anniversary, at_time, date_only, day_diff
from .core.types import ResolvedBirth, TimeOfDay


def lunar_anniversary(birth: ResolvedBirth, lunar_year: int, *, converter: LunarConverter) -> date:
    """Solar date of the lunar birthday in `lunar_year`."""
    lb = birth.lunar
    return converter.lunar_to_solar(lunar_year, lb.month, lb.day, is_leap=lb.is_leap)

def _next_lunar(birth: ResolvedBirth, today: date, converter: LunarConverter) -> date:
    # The comparison year is the reference's own lunar year; lunar months
    # do not sit in a fixed solar month.
    lunar_year = converter.solar_to_lunar(today).year
    candidate = lunar_anniversary(birth, lunar_year, converter=converter)
    if candidate < today:
        candidate = lunar_anniversary(birth, lunar_year + 1, converter=converter)
    return candidate

def _next_solar(birth: ResolvedBirth, today: date) -> date:
    sd = birth.solar_date
    candidate = anniversary(today.year, sd.month, sd.day)
    if candidate < today:
        candidate = anniversary(today.year + 1, sd.month, sd.day)
    return candidate

def next_occurrence(
    birth: ResolvedBirth,
    is_lunar: bool,
    birth_time: Optional[TimeOfDay],
    reference: DateLike,
    *,
    converter: LunarConverter,
) -> datetime:
    today = date_only(reference)
    if today <= birth.solar_date:
        # Not yet born: the first birthday is the birth date itself.
        d = birth.solar_date
    elif is_lunar:
        d = _next_lunar(birth, today, converter)
    else:
        d = _next_solar(birth, today)
    return at_time(d, birth_time)

def days_until(
    birth: ResolvedBirth,
    is_lunar: bool,
    reference: DateLike,
    *,
    converter: LunarConverter,
) -> int:
    """Whole days from the reference date to the next birthday date (0 = today)."""
    nxt = next_occurrence(birth, is_lunar, None, reference, converter=converter)
    return day_diff(nxt, reference)

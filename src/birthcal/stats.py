"""
birthcal.stats
--------------
Per-person views built from the resolver, the occurrence calculator and the
duration decomposer: the upcoming-birthday summary (`BirthdayInfo`) and the
admin life statistics (`LifeStats`).
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional

from .config import DEFAULT_POLICY, AgePolicy
from .core.converter import LunarConverter
from .core.time import DateLike, add_months, date_only, day_diff, parse_time_of_day
from .core.types import BirthdayInfo, DetailedAge, LifeStats, Person
from .duration import detailed_age, total_days_lived, whole_year_age
from .occurrence import next_occurrence
from .resolver import resolve_birth

logger = logging.getLogger(__name__)


def birthday_info(
    person: Person,
    reference: DateLike,
    *,
    converter: LunarConverter,
    policy: AgePolicy = DEFAULT_POLICY,
) -> BirthdayInfo:
    birth = resolve_birth(person.birth_date, person.is_lunar, converter=converter)
    tod = parse_time_of_day(person.birth_time)
    nxt = next_occurrence(birth, person.is_lunar, tod, reference, converter=converter)
    days = day_diff(nxt, reference)

    # The age reached on the upcoming birthday.
    age: Optional[int] = whole_year_age(birth, person.is_lunar, nxt, converter=converter)
    if policy.conceals(person.gender, age):
        age = None

    return BirthdayInfo(
        person=person,
        next_birthday=nxt,
        days_until=days,
        age=age,
        is_today=days == 0,
    )

def upcoming_birthdays(
    people: Iterable[Person],
    window_days: Optional[int],
    reference: DateLike,
    *,
    converter: LunarConverter,
    policy: AgePolicy = DEFAULT_POLICY,
) -> List[BirthdayInfo]:
    """Birthdays within `window_days` of the reference, soonest first, ties in input order."""
    window = policy.window_days if window_days is None else window_days
    if window < 0:
        raise ValueError(f"window_days must be >= 0, got {window}")

    infos = [birthday_info(p, reference, converter=converter, policy=policy) for p in people]
    kept = [i for i in infos if i.days_until <= window]
    logger.debug("upcoming: %d of %d people within %d days of %s", len(kept), len(infos), window, date_only(reference))
    return sorted(kept, key=lambda i: i.days_until)

def life_stats(person: Person, reference: DateLike, *, converter: LunarConverter) -> LifeStats:
    birth = resolve_birth(person.birth_date, person.is_lunar, converter=converter)
    tod = parse_time_of_day(person.birth_time)
    nxt = next_occurrence(birth, person.is_lunar, tod, reference, converter=converter)
    return LifeStats(
        total_days_lived=total_days_lived(birth, reference),
        detailed_age=detailed_age(birth, tod, reference),
        days_until_next_birthday=day_diff(nxt, reference),
        next_birthday=nxt,
        age_at_next_birthday=whole_year_age(birth, person.is_lunar, nxt, converter=converter),
    )

_UNITS = (
    ("years", "岁"),
    ("months", "个月"),
    ("days", "天"),
    ("hours", "小时"),
    ("minutes", "分钟"),
    ("seconds", "秒"),
)

def format_detailed_age(age: DetailedAge) -> str:
    parts = [f"{getattr(age, field)}{unit}" for field, unit in _UNITS if getattr(age, field) > 0]
    return " ".join(parts) or "0天"

def is_within_months(d: DateLike, reference: DateLike, months: int = 3) -> bool:
    limit: date = add_months(date_only(reference), months)
    return date_only(d) <= limit

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from .config import DEFAULT_POLICY, OPEN_POLICY, AgePolicy
from .core.converter import ConverterRegistry, LunarConverter
from .core.time import DateLike, day_diff, parse_time_of_day
from .core.types import BirthdayInfo, DetailedAge, LifeStats, Person, ResolvedBirth
from . import duration as _duration
from . import occurrence as _occurrence
from . import stats as _stats
from .resolver import resolve_birth

ConverterRef = Union[str, LunarConverter, None]
_registry: Optional[ConverterRegistry] = None

def set_registry(reg: ConverterRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ConverterRegistry:
    if _registry is None:
        raise RuntimeError("Converter registry not initialized")
    return _registry

def get_converter(converter: ConverterRef = None) -> LunarConverter:
    if converter is None:
        return _reg().get(_reg().default)
    if isinstance(converter, str):
        return _reg().get(converter)
    return converter

def _ref(reference: Optional[DateLike]) -> DateLike:
    return datetime.now() if reference is None else reference

def list_converters() -> List[str]:
    return _reg().list()

def converter_info(converter: str) -> Dict[str, Any]:
    return _reg().get(converter).info()

def register_converter(name: str, converter: LunarConverter, *, overwrite: bool = False) -> None:
    _reg().register(name, converter, overwrite=overwrite)

# ============================================================
# Single-person queries
# ============================================================

def resolve(person: Person, *, converter: ConverterRef = None) -> ResolvedBirth:
    return resolve_birth(person.birth_date, person.is_lunar, converter=get_converter(converter))

def next_birthday(person: Person, reference: Optional[DateLike] = None, *, converter: ConverterRef = None) -> datetime:
    conv = get_converter(converter)
    birth = resolve_birth(person.birth_date, person.is_lunar, converter=conv)
    tod = parse_time_of_day(person.birth_time)
    return _occurrence.next_occurrence(birth, person.is_lunar, tod, _ref(reference), converter=conv)

def days_until_birthday(person: Person, reference: Optional[DateLike] = None, *, converter: ConverterRef = None) -> int:
    ref = _ref(reference)
    return day_diff(next_birthday(person, ref, converter=converter), ref)

def is_birthday_today(person: Person, reference: Optional[DateLike] = None, *, converter: ConverterRef = None) -> bool:
    return days_until_birthday(person, reference, converter=converter) == 0

def calculate_age(
    person: Person,
    reference: Optional[DateLike] = None,
    *,
    converter: ConverterRef = None,
    policy: AgePolicy = OPEN_POLICY,
) -> Optional[int]:
    """
    Whole-year age at the reference. Lunar birthdays count lunar-year boundaries.

    Returns None when `policy` conceals this person's age; the default policy
    shows every age.
    """
    conv = get_converter(converter)
    birth = resolve_birth(person.birth_date, person.is_lunar, converter=conv)
    age = _duration.whole_year_age(birth, person.is_lunar, _ref(reference), converter=conv)
    if policy.conceals(person.gender, age):
        return None
    return age

def detailed_age(person: Person, reference: Optional[DateLike] = None, *, converter: ConverterRef = None) -> DetailedAge:
    birth = resolve_birth(person.birth_date, person.is_lunar, converter=get_converter(converter))
    return _duration.detailed_age(birth, parse_time_of_day(person.birth_time), _ref(reference))

def total_days_lived(person: Person, reference: Optional[DateLike] = None, *, converter: ConverterRef = None) -> int:
    birth = resolve_birth(person.birth_date, person.is_lunar, converter=get_converter(converter))
    return _duration.total_days_lived(birth, _ref(reference))

# ============================================================
# Aggregate views
# ============================================================

def birthday_info(
    person: Person,
    reference: Optional[DateLike] = None,
    *,
    converter: ConverterRef = None,
    policy: AgePolicy = DEFAULT_POLICY,
) -> BirthdayInfo:
    return _stats.birthday_info(person, _ref(reference), converter=get_converter(converter), policy=policy)

def upcoming_birthdays(
    people: Iterable[Person],
    window_days: Optional[int] = None,
    reference: Optional[DateLike] = None,
    *,
    converter: ConverterRef = None,
    policy: AgePolicy = DEFAULT_POLICY,
) -> List[BirthdayInfo]:
    return _stats.upcoming_birthdays(people, window_days, _ref(reference), converter=get_converter(converter), policy=policy)

def life_stats(person: Person, reference: Optional[DateLike] = None, *, converter: ConverterRef = None) -> LifeStats:
    return _stats.life_stats(person, _ref(reference), converter=get_converter(converter))

format_detailed_age = _stats.format_detailed_age

def is_within_months(d: DateLike, reference: Optional[DateLike] = None, months: int = 3) -> bool:
    return _stats.is_within_months(d, _ref(reference), months)

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Literal, Mapping, Optional, get_args

from .errors import InvalidPersonError

Gender = Literal["male", "female"]
Category = Literal["family", "friend"]

@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    day: int
    is_leap: bool = False  # intercalary month

    def __str__(self) -> str:
        leap = "L" if self.is_leap else ""
        return f"{self.year:04d}-{leap}{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class TimeOfDay:
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

@dataclass(frozen=True)
class ResolvedBirth:
    """A birth record expressed in both calendars. `solar_date` carries no time."""
    lunar: LunarDate
    solar_date: date

@dataclass(frozen=True)
class Person:
    name: str
    birth_date: str  # "Y-M-D", lunar or solar depending on is_lunar
    is_lunar: bool
    gender: Gender
    birth_time: Optional[str] = None  # "HH:MM[:SS]"
    category: Category = "family"
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, rec: Mapping[str, Any]) -> "Person":
        """
        Build a Person from a stored record.

        Accepts both the camelCase layout of the people store
        (birthDate, birthTime, isLunar) and snake_case keys.
        """
        def pick(*keys: str, default: Any = None) -> Any:
            for k in keys:
                if k in rec and rec[k] is not None:
                    return rec[k]
            return default

        birth_date = pick("birthDate", "birth_date")
        if not birth_date:
            raise InvalidPersonError(f"Person record has no birth date: {dict(rec)!r}")

        gender = pick("gender")
        if gender is None:
            raise InvalidPersonError(f"Person record has no gender: {dict(rec)!r}")
        if gender not in get_args(Gender):
            raise InvalidPersonError(f"Unknown gender {gender!r}. Expected one of {get_args(Gender)}")
        category = pick("category", default="family")
        if category not in get_args(Category):
            raise InvalidPersonError(f"Unknown category {category!r}. Expected one of {get_args(Category)}")

        birth_time = pick("birthTime", "birth_time") or None
        person_id = pick("id")
        return cls(
            name=str(pick("name", default="")),
            birth_date=str(birth_date),
            is_lunar=bool(pick("isLunar", "is_lunar", default=False)),
            gender=gender,
            birth_time=str(birth_time) if birth_time is not None else None,
            category=category,
            id=str(person_id) if person_id is not None else None,
        )

@dataclass(frozen=True)
class DetailedAge:
    years: int
    months: int
    days: int
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "years": self.years,
            "months": self.months,
            "days": self.days,
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
        }

@dataclass(frozen=True)
class BirthdayInfo:
    person: Person
    next_birthday: datetime
    days_until: int
    age: Optional[int]  # None when concealed
    is_today: bool

    @property
    def is_age_concealed(self) -> bool:
        return self.age is None

@dataclass(frozen=True)
class LifeStats:
    total_days_lived: int
    detailed_age: DetailedAge
    days_until_next_birthday: int
    next_birthday: datetime
    age_at_next_birthday: int

"""birthcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    resolve,
    next_birthday,
    days_until_birthday,
    is_birthday_today,
    calculate_age,
    detailed_age,
    total_days_lived,
    birthday_info,
    upcoming_birthdays,
    life_stats,
    format_detailed_age,
    is_within_months,
    list_converters,
    get_converter,
    converter_info,
    register_converter,
)
from .config import AgePolicy, DEFAULT_POLICY, OPEN_POLICY
from .core.errors import (
    BirthcalError,
    InvalidDateError,
    InvalidPersonError,
    ConverterUnavailableError,
    ReferenceBeforeBirthError,
)
from .core.types import BirthdayInfo, DetailedAge, LifeStats, LunarDate, Person, ResolvedBirth
from .duration import decompose

__all__ = [
    "resolve",
    "next_birthday",
    "days_until_birthday",
    "is_birthday_today",
    "calculate_age",
    "detailed_age",
    "total_days_lived",
    "birthday_info",
    "upcoming_birthdays",
    "life_stats",
    "format_detailed_age",
    "is_within_months",
    "list_converters",
    "get_converter",
    "converter_info",
    "register_converter",
    "decompose",
    "AgePolicy",
    "DEFAULT_POLICY",
    "OPEN_POLICY",
    "BirthcalError",
    "InvalidDateError",
    "InvalidPersonError",
    "ReferenceBeforeBirthError",
    "ConverterUnavailableError",
    "BirthdayInfo",
    "DetailedAge",
    "LifeStats",
    "LunarDate",
    "Person",
    "ResolvedBirth",
]

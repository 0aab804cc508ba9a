# tests/conftest.py

from datetime import date, timedelta

import pytest

import birthcal
from birthcal.core.errors import InvalidDateError
from birthcal.core.types import LunarDate


class TableConverter:
    """
    Fake lunisolar calendar for engine tests.

    Lunar year Y starts on Gregorian Feb 1 of Y. Months 1..11 alternate
    30/29 days (325 days in total); month 12 runs up to the next Feb 1.
    There are no leap months.
    """
    LENGTHS = [30, 29] * 5 + [30]

    def info(self):
        return {"name": "table"}

    def month_lengths(self, year):
        span = (date(year + 1, 2, 1) - date(year, 2, 1)).days
        return self.LENGTHS + [span - sum(self.LENGTHS)]

    def is_valid_lunar(self, year, month, day, *, is_leap=False):
        if is_leap or not 1 <= month <= 12:
            return False
        return 1 <= day <= self.month_lengths(year)[month - 1]

    def lunar_to_solar(self, year, month, day, *, is_leap=False):
        if not self.is_valid_lunar(year, month, day, is_leap=is_leap):
            raise InvalidDateError(f"no lunar {year}-{month}-{day} in table")
        offset = sum(self.month_lengths(year)[: month - 1]) + day - 1
        return date(year, 2, 1) + timedelta(days=offset)

    def solar_to_lunar(self, d):
        year = d.year if d >= date(d.year, 2, 1) else d.year - 1
        offset = (d - date(year, 2, 1)).days
        for month, n in enumerate(self.month_lengths(year), start=1):
            if offset < n:
                return LunarDate(year, month, offset + 1)
            offset -= n
        raise AssertionError("unreachable")


@pytest.fixture
def table():
    return TableConverter()


@pytest.fixture
def real():
    return birthcal.get_converter("lunar-python")


@pytest.fixture
def make_person():
    def make(birth_date, *, lunar=False, gender="male", time=None, name="p"):
        return birthcal.Person(name=name, birth_date=birth_date, is_lunar=lunar, gender=gender, birth_time=time)
    return make

"""
birthcal.engines.lunar_python
-----------------------------
Converter backed by the `lunar_python` tables (the Python port of
lunar-javascript). lunar_python marks an intercalary month with a negative
month number; that convention stays inside this module.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict

from lunar_python import Lunar, LunarYear, Solar

from birthcal.core.errors import InvalidDateError
from birthcal.core.types import LunarDate

logger = logging.getLogger(__name__)


class LunarPythonConverter:
    name = "lunar-python"

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "calendar": "chinese-lunisolar",
            "leap_months": "flag",
            "backend": "lunar_python",
        }

    def is_valid_lunar(self, year: int, month: int, day: int, *, is_leap: bool = False) -> bool:
        if not (1 <= month <= 12) or day < 1:
            return False
        lm = LunarYear.fromYear(year).getMonth(-month if is_leap else month)
        if lm is None:
            return False
        return day <= lm.getDayCount()

    def lunar_to_solar(self, year: int, month: int, day: int, *, is_leap: bool = False) -> date:
        if not self.is_valid_lunar(year, month, day, is_leap=is_leap):
            leap = "leap " if is_leap else ""
            raise InvalidDateError(f"Lunar date {year}-{leap}{month}-{day} does not exist")
        try:
            s = Lunar.fromYmd(year, -month if is_leap else month, day).getSolar()
        except Exception as e:
            raise InvalidDateError(f"Cannot convert lunar {year}-{month}-{day}: {e}") from e
        out = date(s.getYear(), s.getMonth(), s.getDay())
        logger.debug("lunar %s-%s%s-%s -> solar %s", year, "L" if is_leap else "", month, day, out)
        return out

    def solar_to_lunar(self, d: date) -> LunarDate:
        try:
            lunar = Solar.fromYmd(d.year, d.month, d.day).getLunar()
        except Exception as e:
            raise InvalidDateError(f"Cannot convert solar {d.isoformat()}: {e}") from e
        m = lunar.getMonth()
        return LunarDate(lunar.getYear(), abs(m), lunar.getDay(), is_leap=m < 0)


def build_lunar_python_converter() -> LunarPythonConverter:
    return LunarPythonConverter()

"""
birthcal.resolver
-----------------
Normalizes a stored birth date into both calendars.
"""

from __future__ import annotations

import logging

from .core.converter import LunarConverter
from .core.errors import InvalidDateError
from .core.time import parse_solar, parse_ymd
from .core.types import LunarDate, ResolvedBirth

logger = logging.getLogger(__name__)


def resolve_birth(birth_date_raw: str, is_lunar: bool, *, converter: LunarConverter) -> ResolvedBirth:
    """
    Lunar records keep their Y-M-D verbatim and gain a solar date; solar
    records keep their date verbatim and gain the lunar triple.
    """
    if is_lunar:
        y, m, d = parse_ymd(birth_date_raw)
        if not converter.is_valid_lunar(y, m, d):
            raise InvalidDateError(f"Lunar date {birth_date_raw!r} does not exist")
        lunar = LunarDate(y, m, d)
        solar = converter.lunar_to_solar(y, m, d)
    else:
        solar = parse_solar(birth_date_raw)
        lunar = converter.solar_to_lunar(solar)

    logger.debug("resolved %r (lunar=%s): lunar %s, solar %s", birth_date_raw, is_lunar, lunar, solar)
    return ResolvedBirth(lunar=lunar, solar_date=solar)

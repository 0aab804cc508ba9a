from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol

from .errors import ConverterUnavailableError
from .types import LunarDate

class LunarConverter(Protocol):
    """
    Chinese lunisolar <-> Gregorian conversion.

    Implementations are read-only and safe to share between threads.
    `lunar_to_solar` raises InvalidDateError for lunar dates that do not exist.
    """
    def info(self) -> Dict[str, Any]: ...
    def lunar_to_solar(self, year: int, month: int, day: int, *, is_leap: bool = False) -> date: ...
    def solar_to_lunar(self, d: date) -> LunarDate: ...
    def is_valid_lunar(self, year: int, month: int, day: int, *, is_leap: bool = False) -> bool: ...

@dataclass
class ConverterRegistry:
    _converters: Dict[str, LunarConverter]
    default: str = "lunar-python"

    def get(self, name: str) -> LunarConverter:
        if name not in self._converters:
            raise ConverterUnavailableError(f"Unknown converter '{name}'. Available: {sorted(self._converters)}")
        return self._converters[name]

    def list(self) -> List[str]:
        return sorted(self._converters.keys())

    def register(self, name: str, converter: LunarConverter, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._converters):
            raise KeyError(f"Converter '{name}' already exists. Use overwrite=True to replace.")
        self._converters[name] = converter

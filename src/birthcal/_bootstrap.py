from __future__ import annotations
from birthcal.core.converter import ConverterRegistry
from birthcal.engines.lunar_python import build_lunar_python_converter

def build_registry() -> ConverterRegistry:
    converters = {"lunar-python": build_lunar_python_converter()}
    return ConverterRegistry(converters, default="lunar-python")

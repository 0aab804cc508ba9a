"""Diagnostics package.

- birthday_table: text table, always available
- birthday_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["birthday_table", "birthday_scatter"]

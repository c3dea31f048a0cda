"""Human-readable size and count formatting for scan summaries."""

from __future__ import annotations

import locale

SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_size(num_bytes: int) -> str:
    """Format bytes with 1024 steps, two decimals, capped at ``GB``."""
    size = float(num_bytes)
    unit_idx = 0
    while size >= 1024 and unit_idx < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_idx += 1
    return f"{size:.2f} {SIZE_UNITS[unit_idx]}"


def format_number(num: int) -> str:
    """Format an integer with the active locale's thousands grouping.

    The C/POSIX locale defines no separator; ``,`` grouping is used there so
    output matches the common ``1,234,567`` form.
    """
    value = int(num)
    if not locale.localeconv()["thousands_sep"]:
        return f"{value:,}"
    return locale.format_string("%d", value, grouping=True)


__all__ = [
    "SIZE_UNITS",
    "format_number",
    "format_size",
]

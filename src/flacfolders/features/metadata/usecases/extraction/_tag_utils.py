"""Tag utility helpers.

Where: src/flacfolders/features/metadata/usecases/extraction/_tag_utils.py
What: Pure helpers for normalising raw Vorbis comment values.
Why: Keep parsing rules testable without touching real files.
"""

from __future__ import annotations

import re
from typing import Final

_LEADING_YEAR: Final[re.Pattern[str]] = re.compile(r"^(\d{4})")

__all__ = [
    "leading_year",
    "safe_get_first",
    "strip_track_total",
]


def safe_get_first(data: list[str] | None, default: str | None = None) -> str | None:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def leading_year(value: str | None) -> str | None:
    """Return the leading four digits of ``value`` (``1979-11-30`` -> ``1979``)."""
    if not value:
        return None
    match = _LEADING_YEAR.match(value.strip())
    return match.group(1) if match else None


def strip_track_total(value: str | None) -> str | None:
    """Drop the total from ``N/M`` track values (``5/12`` -> ``5``)."""
    if value is None:
        return None
    number = value.split("/", 1)[0].strip()
    return number or None

"""String forms of parsed values.

:func:`format_datetime` is the exact inverse of parsing: it keeps the seconds
field and the fraction digits exactly as they were parsed. :func:`format_normalized`
produces the shortest equivalent string (the "valid normalized local date and
time string" of the HTML standard).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Datetime, LocalDate, LocalTime

CANONICAL_SEPARATOR = "T"


def format_date(value: LocalDate) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _join_time(hour: int, minute: int, second: int | None, digits: str) -> str:
    text = f"{hour:02d}:{minute:02d}"
    if second is None:
        return text
    text = f"{text}:{second:02d}"
    if not digits:
        return text
    return f"{text}.{digits}"


def format_time(value: LocalTime) -> str:
    digits = value.fraction.digits if value.fraction is not None else ""
    return _join_time(value.hour, value.minute, value.second, digits)


def format_datetime(value: Datetime) -> str:
    """Return ``YYYY-MM-DDTHH:MM[:SS[.fff...]]`` mirroring what was parsed."""
    return f"{format_date(value.date)}{CANONICAL_SEPARATOR}{format_time(value.time)}"


def format_normalized(value: Datetime) -> str:
    """Return the shortest string denoting the same instant.

    Seconds are dropped when they are zero and no non-zero fraction follows;
    trailing zeros of the fraction are dropped.
    """
    time = value.time
    digits = time.fraction.digits.rstrip("0") if time.fraction is not None else ""
    second = (time.second or 0) if (time.second or digits) else None
    text = _join_time(time.hour, time.minute, second, digits)
    return f"{format_date(value.date)}{CANONICAL_SEPARATOR}{text}"


__all__ = [
    "CANONICAL_SEPARATOR",
    "format_date",
    "format_datetime",
    "format_normalized",
    "format_time",
]

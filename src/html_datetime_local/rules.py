"""Calendar and clock rules shared by the validator and the value objects."""

from __future__ import annotations

from .errors import (
    Component,
    InvalidDayError,
    InvalidFractionError,
    InvalidHourError,
    InvalidMinuteError,
    InvalidMonthError,
    InvalidSecondError,
    InvalidYearError,
)

MIN_YEAR = 1
MAX_YEAR = 9999

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def _require_int(value: object, component: Component) -> None:
    # bool is an int subclass but never a calendar field.
    if type(value) is not int:
        raise TypeError(f"{component} must be an int, got {type(value).__name__}")


def is_leap_year(year: int) -> bool:
    """Gregorian rule: every fourth year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def check_year(year: int, *, offset: int | None = None) -> int:
    _require_int(year, Component.YEAR)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(year, minimum=MIN_YEAR, maximum=MAX_YEAR, offset=offset)
    return year


def check_month(month: int, *, offset: int | None = None) -> int:
    _require_int(month, Component.MONTH)
    if not 1 <= month <= 12:
        raise InvalidMonthError(month, minimum=1, maximum=12, offset=offset)
    return month


def check_day(year: int, month: int, day: int, *, offset: int | None = None) -> int:
    """Validate ``day`` against the month it belongs to.

    ``year`` and ``month`` must already have passed their own checks.
    """
    _require_int(day, Component.DAY)
    limit = days_in_month(year, month)
    if not 1 <= day <= limit:
        raise InvalidDayError(day, year=year, month=month, maximum=limit, offset=offset)
    return day


def check_hour(hour: int, *, offset: int | None = None) -> int:
    _require_int(hour, Component.HOUR)
    if not 0 <= hour <= 23:
        raise InvalidHourError(hour, minimum=0, maximum=23, offset=offset)
    return hour


def check_minute(minute: int, *, offset: int | None = None) -> int:
    _require_int(minute, Component.MINUTE)
    if not 0 <= minute <= 59:
        raise InvalidMinuteError(minute, minimum=0, maximum=59, offset=offset)
    return minute


def check_second(second: int, *, offset: int | None = None) -> int:
    _require_int(second, Component.SECOND)
    # No leap seconds.
    if not 0 <= second <= 59:
        raise InvalidSecondError(second, minimum=0, maximum=59, offset=offset)
    return second


def is_ascii_digits(text: str) -> bool:
    """Return True for a non-empty run of ``0``-``9`` only."""
    return bool(text) and text.isascii() and text.isdigit()


def check_fraction_digits(digits: str) -> str:
    if not isinstance(digits, str):
        raise TypeError(f"fraction digits must be a str, got {type(digits).__name__}")
    if not is_ascii_digits(digits):
        raise InvalidFractionError(
            f"fraction must be one or more ASCII digits, got {digits!r}"
        )
    return digits


__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "check_day",
    "check_fraction_digits",
    "check_hour",
    "check_minute",
    "check_month",
    "check_second",
    "check_year",
    "days_in_month",
    "is_ascii_digits",
    "is_leap_year",
]

"""Immutable value objects for a parsed local date and time.

Each object re-checks its own invariants on construction, so an instance that
exists is calendar- and clock-valid regardless of how it was created. The usual
way to obtain one is :func:`html_datetime_local.parse_datetime`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _date
from datetime import datetime as _datetime
from datetime import time as _time
from decimal import Decimal

from .errors import InvalidFractionError
from .rules import (
    check_day,
    check_fraction_digits,
    check_hour,
    check_minute,
    check_month,
    check_second,
    check_year,
)

_MICROSECOND_DIGITS = 6


@dataclass(frozen=True, slots=True)
class LocalDate:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        check_year(self.year)
        check_month(self.month)
        check_day(self.year, self.month, self.day)

    def to_date(self) -> _date:
        return _date(self.year, self.month, self.day)

    def __str__(self) -> str:
        from .formatting import format_date

        return format_date(self)


@dataclass(frozen=True, slots=True)
class SecondFraction:
    """Sub-second digits exactly as written after the ``.``.

    ``.5`` and ``.500`` compare unequal here because they carry different
    precision; compare :attr:`value` for numeric equality.
    """

    digits: str

    def __post_init__(self) -> None:
        check_fraction_digits(self.digits)

    @property
    def precision(self) -> int:
        """Number of fractional digits that were present."""
        return len(self.digits)

    @property
    def value(self) -> Decimal:
        return Decimal(f"0.{self.digits}")

    @property
    def microseconds(self) -> int:
        """Fraction in microseconds, truncating any further digits."""
        return int(self.digits[:_MICROSECOND_DIGITS].ljust(_MICROSECOND_DIGITS, "0"))

    def __str__(self) -> str:
        return self.digits


@dataclass(frozen=True, slots=True)
class LocalTime:
    """Time of day; ``second`` is ``None`` when the seconds field was omitted."""

    hour: int
    minute: int
    second: int | None = None
    fraction: SecondFraction | None = None

    def __post_init__(self) -> None:
        check_hour(self.hour)
        check_minute(self.minute)
        if self.fraction is not None and not isinstance(self.fraction, SecondFraction):
            raise TypeError(
                f"fraction must be a SecondFraction, got {type(self.fraction).__name__}"
            )
        if self.second is not None:
            check_second(self.second)
        elif self.fraction is not None:
            raise InvalidFractionError("fraction requires a seconds field")

    @property
    def has_seconds(self) -> bool:
        return self.second is not None

    def to_time(self) -> _time:
        microsecond = self.fraction.microseconds if self.fraction is not None else 0
        return _time(self.hour, self.minute, self.second or 0, microsecond)

    def __str__(self) -> str:
        from .formatting import format_time

        return format_time(self)


@dataclass(frozen=True, slots=True)
class Datetime:
    """A local date and time as submitted by ``<input type="datetime-local">``.

    The separator used in the source text is not retained; formatting always
    uses ``T``.
    """

    date: LocalDate
    time: LocalTime

    def __post_init__(self) -> None:
        if not isinstance(self.date, LocalDate):
            raise TypeError(f"date must be a LocalDate, got {type(self.date).__name__}")
        if not isinstance(self.time, LocalTime):
            raise TypeError(f"time must be a LocalTime, got {type(self.time).__name__}")

    @classmethod
    def parse(cls, text: str, start: int = 0) -> Datetime:
        from .parser import parse_datetime

        return parse_datetime(text, start)

    def to_datetime(self) -> _datetime:
        """Return a naive :class:`datetime.datetime`; digits beyond microseconds are dropped."""
        return _datetime.combine(self.date.to_date(), self.time.to_time())

    def __str__(self) -> str:
        from .formatting import format_datetime

        return format_datetime(self)


__all__ = ["Datetime", "LocalDate", "LocalTime", "SecondFraction"]

"""Turn scanned tokens into validated value objects.

Fields are checked in a fixed order (year, month, day, hour, minute, second,
fraction) and the first violation wins. Range errors carry the token offset so
callers can point at the offending part of the original text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import Datetime, LocalDate, LocalTime, SecondFraction
from .rules import (
    check_day,
    check_fraction_digits,
    check_hour,
    check_minute,
    check_month,
    check_second,
    check_year,
)

if TYPE_CHECKING:
    from .scanner import ScannedDate, ScannedDatetime, ScannedTime


def build_date(scanned: ScannedDate) -> LocalDate:
    year = check_year(int(scanned.year.text), offset=scanned.year.offset)
    month = check_month(int(scanned.month.text), offset=scanned.month.offset)
    day = check_day(year, month, int(scanned.day.text), offset=scanned.day.offset)
    return LocalDate(year=year, month=month, day=day)


def build_time(scanned: ScannedTime) -> LocalTime:
    hour = check_hour(int(scanned.hour.text), offset=scanned.hour.offset)
    minute = check_minute(int(scanned.minute.text), offset=scanned.minute.offset)
    second: int | None = None
    if scanned.second is not None:
        second = check_second(int(scanned.second.text), offset=scanned.second.offset)
    fraction: SecondFraction | None = None
    if scanned.fraction is not None:
        fraction = SecondFraction(check_fraction_digits(scanned.fraction.text))
    return LocalTime(hour=hour, minute=minute, second=second, fraction=fraction)


def build_datetime(scanned: ScannedDatetime) -> Datetime:
    return Datetime(date=build_date(scanned.date), time=build_time(scanned.time))


__all__ = ["build_date", "build_datetime", "build_time"]

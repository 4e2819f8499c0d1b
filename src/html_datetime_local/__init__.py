"""Parse and format WHATWG "local date and time" strings.

>>> from html_datetime_local import parse_datetime
>>> value = parse_datetime("2023-12-31 23:59:59.50")
>>> str(value)
'2023-12-31T23:59:59.50'
"""

from __future__ import annotations

from importlib import metadata

from .errors import (
    Component,
    DatetimeParseError,
    FieldValueError,
    InvalidDayError,
    InvalidFractionError,
    InvalidHourError,
    InvalidMinuteError,
    InvalidMonthError,
    InvalidSecondError,
    InvalidYearError,
    MalformedGrammarError,
)
from .formatting import format_date, format_datetime, format_normalized, format_time
from .model import Datetime, LocalDate, LocalTime, SecondFraction
from .parser import is_valid_datetime, parse_date, parse_datetime, parse_time
from .rules import days_in_month, is_leap_year

try:
    __version__ = metadata.version("html-datetime-local")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Component",
    "Datetime",
    "DatetimeParseError",
    "FieldValueError",
    "InvalidDayError",
    "InvalidFractionError",
    "InvalidHourError",
    "InvalidMinuteError",
    "InvalidMonthError",
    "InvalidSecondError",
    "InvalidYearError",
    "LocalDate",
    "LocalTime",
    "MalformedGrammarError",
    "SecondFraction",
    "__version__",
    "days_in_month",
    "format_date",
    "format_datetime",
    "format_normalized",
    "format_time",
    "is_leap_year",
    "is_valid_datetime",
    "parse_date",
    "parse_datetime",
    "parse_time",
]

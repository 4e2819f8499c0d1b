"""Error taxonomy for local date and time parsing.

Every error derives from :class:`DatetimeParseError`, itself a ``ValueError`` so
callers that only care about "bad input" can catch the builtin. The concrete
classes carry enough context to render a precise message without re-deriving
calendar rules:

- :class:`MalformedGrammarError` - the text does not match the fixed grammar
- :class:`FieldValueError` subclasses - a field is syntactically fine but out of range
- :class:`InvalidFractionError` - a fraction built by hand violates its invariants
"""

from __future__ import annotations

from enum import StrEnum

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class Component(StrEnum):
    """Named part of a local date and time string."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    FRACTION = "fraction"

    DATE = "date"
    TIME = "time"


class DatetimeParseError(ValueError):
    """Base class for all rejections."""


class MalformedGrammarError(DatetimeParseError):
    """Raised when the input does not follow the fixed token layout."""

    def __init__(self, *, offset: int, expected: str, found: str) -> None:
        self.offset = offset
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected} at offset {offset}, found {found}")


class FieldValueError(DatetimeParseError):
    """Raised when a numeric field falls outside its valid range."""

    component: Component

    def __init__(
        self,
        value: int,
        *,
        minimum: int,
        maximum: int,
        offset: int | None = None,
    ) -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.offset = offset
        super().__init__(self._describe())

    def _describe(self) -> str:
        return (
            f"{self.component} {self.value} out of range: "
            f"must be between {self.minimum} and {self.maximum}"
        )


class InvalidYearError(FieldValueError):
    component = Component.YEAR


class InvalidMonthError(FieldValueError):
    component = Component.MONTH


class InvalidDayError(FieldValueError):
    """Day is zero or exceeds the length of its month.

    ``maximum`` is the number of days in ``month`` of ``year``.
    """

    component = Component.DAY

    def __init__(
        self,
        value: int,
        *,
        year: int,
        month: int,
        maximum: int,
        offset: int | None = None,
    ) -> None:
        self.year = year
        self.month = month
        super().__init__(value, minimum=1, maximum=maximum, offset=offset)

    def _describe(self) -> str:
        return (
            f"day {self.value} invalid for {_MONTH_NAMES[self.month - 1]} {self.year}: "
            f"must be between {self.minimum} and {self.maximum}"
        )


class InvalidHourError(FieldValueError):
    component = Component.HOUR


class InvalidMinuteError(FieldValueError):
    component = Component.MINUTE


class InvalidSecondError(FieldValueError):
    component = Component.SECOND


class InvalidFractionError(DatetimeParseError):
    """Raised when a fractional second is built from something other than digits."""

    component = Component.FRACTION


__all__ = [
    "Component",
    "DatetimeParseError",
    "FieldValueError",
    "InvalidDayError",
    "InvalidFractionError",
    "InvalidHourError",
    "InvalidMinuteError",
    "InvalidMonthError",
    "InvalidSecondError",
    "InvalidYearError",
    "MalformedGrammarError",
]

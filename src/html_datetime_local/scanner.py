"""Grammar scanner for the local date and time microsyntax.

The grammar is fixed-position::

    date  = 4DIGIT "-" 2DIGIT "-" 2DIGIT
    time  = 2DIGIT ":" 2DIGIT [ ":" 2DIGIT [ "." 1*DIGIT ] ]
    dt    = date ("T" | " ") time

Scanning only splits the text into digit tokens; numeric ranges are the
validator's concern, so ``"9999-99-99T99:99"`` scans without complaint.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MalformedGrammarError
from .rules import is_ascii_digits

DATE_SEPARATOR = "-"
TIME_SEPARATOR = ":"
FRACTION_SEPARATOR = "."
DATETIME_SEPARATORS = ("T", " ")


@dataclass(frozen=True, slots=True)
class Token:
    """A run of digits and the offset where it starts in the scanned text."""

    text: str
    offset: int


@dataclass(frozen=True, slots=True)
class ScannedDate:
    year: Token
    month: Token
    day: Token


@dataclass(frozen=True, slots=True)
class ScannedTime:
    hour: Token
    minute: Token
    second: Token | None = None
    fraction: Token | None = None


@dataclass(frozen=True, slots=True)
class ScannedDatetime:
    date: ScannedDate
    time: ScannedTime


def _describe(char: str | None) -> str:
    return "end of input" if char is None else repr(char)


class _Cursor:
    __slots__ = ("position", "text")

    def __init__(self, text: str, position: int) -> None:
        if not 0 <= position <= len(text):
            raise ValueError(
                f"Start offset {position} is outside of the input (length {len(text)})"
            )
        self.text = text
        self.position = position

    def peek(self) -> str | None:
        if self.position >= len(self.text):
            return None
        return self.text[self.position]

    def digits(self, count: int, label: str) -> Token:
        start = self.position
        for index in range(start, start + count):
            char = self.text[index] if index < len(self.text) else None
            if char is None or not is_ascii_digits(char):
                raise MalformedGrammarError(
                    offset=index,
                    expected=f"{count} digits for {label}",
                    found=_describe(char),
                )
        self.position = start + count
        return Token(self.text[start : self.position], start)

    def digit_run(self, label: str) -> Token:
        start = self.position
        end = start
        while end < len(self.text) and is_ascii_digits(self.text[end]):
            end += 1
        if end == start:
            raise MalformedGrammarError(
                offset=start,
                expected=f"one or more digits for {label}",
                found=_describe(self.peek()),
            )
        self.position = end
        return Token(self.text[start:end], start)

    def literal(self, *choices: str) -> None:
        char = self.peek()
        if char not in choices:
            expected = " or ".join(repr(choice) for choice in choices)
            raise MalformedGrammarError(
                offset=self.position, expected=expected, found=_describe(char)
            )
        self.position += 1

    def skip(self, char: str) -> bool:
        if self.peek() == char:
            self.position += 1
            return True
        return False

    def finish(self) -> None:
        if self.position != len(self.text):
            raise MalformedGrammarError(
                offset=self.position,
                expected="end of input",
                found=_describe(self.peek()),
            )


def _scan_date(cursor: _Cursor) -> ScannedDate:
    year = cursor.digits(4, "year")
    cursor.literal(DATE_SEPARATOR)
    month = cursor.digits(2, "month")
    cursor.literal(DATE_SEPARATOR)
    day = cursor.digits(2, "day")
    return ScannedDate(year=year, month=month, day=day)


def _scan_time(cursor: _Cursor) -> ScannedTime:
    hour = cursor.digits(2, "hour")
    cursor.literal(TIME_SEPARATOR)
    minute = cursor.digits(2, "minute")
    if not cursor.skip(TIME_SEPARATOR):
        return ScannedTime(hour=hour, minute=minute)
    second = cursor.digits(2, "second")
    if not cursor.skip(FRACTION_SEPARATOR):
        return ScannedTime(hour=hour, minute=minute, second=second)
    fraction = cursor.digit_run("fraction")
    return ScannedTime(hour=hour, minute=minute, second=second, fraction=fraction)


def scan_date(text: str, start: int = 0) -> ScannedDate:
    """Scan ``text[start:]`` as a date string; the whole remainder must match."""
    cursor = _Cursor(text, start)
    scanned = _scan_date(cursor)
    cursor.finish()
    return scanned


def scan_time(text: str, start: int = 0) -> ScannedTime:
    """Scan ``text[start:]`` as a time string; the whole remainder must match."""
    cursor = _Cursor(text, start)
    scanned = _scan_time(cursor)
    cursor.finish()
    return scanned


def scan_datetime(text: str, start: int = 0) -> ScannedDatetime:
    """Scan ``text[start:]`` as a local date and time string.

    Raises :class:`MalformedGrammarError` with the offset of the first token
    that is missing or malformed, including any trailing characters.
    """
    cursor = _Cursor(text, start)
    date = _scan_date(cursor)
    cursor.literal(*DATETIME_SEPARATORS)
    time = _scan_time(cursor)
    cursor.finish()
    return ScannedDatetime(date=date, time=time)


__all__ = [
    "DATETIME_SEPARATORS",
    "ScannedDate",
    "ScannedDatetime",
    "ScannedTime",
    "Token",
    "scan_date",
    "scan_datetime",
    "scan_time",
]

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime, time
from decimal import Decimal

import pytest

from html_datetime_local.errors import (
    InvalidDayError,
    InvalidFractionError,
    InvalidHourError,
    InvalidMinuteError,
    InvalidSecondError,
)
from html_datetime_local.model import Datetime, LocalDate, LocalTime, SecondFraction


def test_local_date_validates_on_construction() -> None:
    with pytest.raises(InvalidDayError) as exc:
        LocalDate(2023, 2, 29)

    assert exc.value.offset is None
    assert LocalDate(2024, 2, 29).to_date() == date(2024, 2, 29)


def test_local_time_validates_on_construction() -> None:
    with pytest.raises(InvalidHourError):
        LocalTime(24, 0)
    with pytest.raises(InvalidMinuteError):
        LocalTime(0, 60)
    with pytest.raises(InvalidSecondError):
        LocalTime(0, 0, 60)


def test_fraction_requires_seconds() -> None:
    with pytest.raises(InvalidFractionError, match="requires a seconds field"):
        LocalTime(12, 30, fraction=SecondFraction("5"))


@pytest.mark.parametrize("digits", ["", "5a", "-1", "٥"])
def test_fraction_rejects_non_digits(digits: str) -> None:
    with pytest.raises(InvalidFractionError):
        SecondFraction(digits)


def test_fraction_keeps_precision_and_exact_value() -> None:
    half = SecondFraction("5")
    padded = SecondFraction("500")

    assert half != padded
    assert half.value == padded.value == Decimal("0.5")
    assert (half.precision, padded.precision) == (1, 3)
    assert half.microseconds == padded.microseconds == 500_000


def test_fraction_truncates_to_microseconds() -> None:
    fraction = SecondFraction("12345678901234567890")

    assert fraction.microseconds == 123_456
    assert fraction.value == Decimal("0.12345678901234567890")


def test_local_time_conversion() -> None:
    assert LocalTime(23, 59).to_time() == time(23, 59)
    assert not LocalTime(23, 59).has_seconds
    assert LocalTime(23, 59, 0).has_seconds
    assert LocalTime(23, 59, 59, SecondFraction("25")).to_time() == time(23, 59, 59, 250_000)


def test_datetime_conversion_and_string_form() -> None:
    value = Datetime(LocalDate(2023, 12, 31), LocalTime(23, 59, 59, SecondFraction("050")))

    assert value.to_datetime() == datetime(2023, 12, 31, 23, 59, 59, 50_000)
    assert str(value) == "2023-12-31T23:59:59.050"
    assert str(value.date) == "2023-12-31"
    assert str(value.time) == "23:59:59.050"
    assert str(value.time.fraction) == "050"


def test_values_are_immutable_and_hashable() -> None:
    value = Datetime(LocalDate(2023, 12, 31), LocalTime(23, 59))

    with pytest.raises(FrozenInstanceError):
        value.date = LocalDate(2024, 1, 1)  # type: ignore[misc]

    assert len({value, Datetime(LocalDate(2023, 12, 31), LocalTime(23, 59))}) == 1


@pytest.mark.parametrize(
    ("fields", "message"),
    [
        ((True, 1, 1), "year must be an int, got bool"),
        ((2023.0, 1, 1), "year must be an int, got float"),
        ((2023, "1", 1), "month must be an int, got str"),
        ((2023, 1, 1.5), "day must be an int, got float"),
    ],
)
def test_local_date_rejects_non_int_fields(fields: tuple[object, ...], message: str) -> None:
    with pytest.raises(TypeError, match=message):
        LocalDate(*fields)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("fields", "message"),
    [
        ((12.5, 0), "hour must be an int, got float"),
        ((12, False), "minute must be an int, got bool"),
        ((12, 0, "5"), "second must be an int, got str"),
    ],
)
def test_local_time_rejects_non_int_fields(fields: tuple[object, ...], message: str) -> None:
    with pytest.raises(TypeError, match=message):
        LocalTime(*fields)  # type: ignore[arg-type]


def test_local_time_rejects_plain_string_fraction() -> None:
    with pytest.raises(TypeError, match="fraction must be a SecondFraction, got str"):
        LocalTime(0, 0, 5, fraction="5")  # type: ignore[arg-type]


def test_second_fraction_rejects_non_string_digits() -> None:
    with pytest.raises(TypeError, match="fraction digits must be a str, got int"):
        SecondFraction(5)  # type: ignore[arg-type]


def test_datetime_rejects_foreign_parts() -> None:
    with pytest.raises(TypeError, match="date must be a LocalDate, got date"):
        Datetime(date(2023, 12, 31), LocalTime(23, 59))  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="time must be a LocalTime, got time"):
        Datetime(LocalDate(2023, 12, 31), time(23, 59))  # type: ignore[arg-type]

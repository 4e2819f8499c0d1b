from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from html_datetime_local import LocalDate, LocalTime, parse_datetime
from html_datetime_local.adapters.pydantic import (
    LocalDateField,
    LocalDatetimeField,
    LocalTimeField,
)


class BookingForm(BaseModel):
    starts_at: LocalDatetimeField
    day: LocalDateField
    reminder: LocalTimeField


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "starts_at": "2023-12-31 23:59:59.50",
        "day": "2023-12-31",
        "reminder": "08:00",
    }
    payload.update(overrides)
    return payload


def test_fields_parse_strings() -> None:
    form = BookingForm.model_validate(_payload())

    assert form.starts_at == parse_datetime("2023-12-31T23:59:59.50")
    assert form.day == LocalDate(2023, 12, 31)
    assert form.reminder == LocalTime(8, 0)


def test_fields_accept_parsed_values() -> None:
    value = parse_datetime("2024-02-29T12:00")

    form = BookingForm.model_validate(_payload(starts_at=value))

    assert form.starts_at is value


def test_fields_serialize_to_canonical_strings() -> None:
    form = BookingForm.model_validate(_payload())

    assert form.model_dump() == {
        "starts_at": "2023-12-31T23:59:59.50",
        "day": "2023-12-31",
        "reminder": "08:00",
    }
    assert BookingForm.model_validate_json(form.model_dump_json()) == form


def test_invalid_strings_become_validation_errors() -> None:
    with pytest.raises(ValidationError) as exc:
        BookingForm.model_validate(_payload(starts_at="2023-02-29T10:00"))

    errors = exc.value.errors()
    assert len(errors) == 1
    assert errors[0]["loc"] == ("starts_at",)
    assert errors[0]["type"] == "value_error"
    assert "day 29 invalid for February 2023" in errors[0]["msg"]


def test_non_string_input_is_rejected() -> None:
    with pytest.raises(ValidationError, match="Expected a string, got int"):
        BookingForm.model_validate(_payload(reminder=800))


def test_json_schema_describes_strings() -> None:
    schema = BookingForm.model_json_schema()

    assert schema["properties"]["starts_at"]["format"] == "datetime-local"
    assert schema["properties"]["starts_at"]["type"] == "string"

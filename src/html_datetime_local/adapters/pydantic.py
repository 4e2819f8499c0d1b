"""Pydantic field types for payloads carrying ``datetime-local`` values.

Use them as annotations on request models::

    class BookingForm(BaseModel):
        starts_at: LocalDatetimeField

Strings are parsed strictly; parse errors surface as ``ValidationError`` entries
of type ``value_error``. Values serialize back to their canonical string.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, TypeVar

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from html_datetime_local.formatting import format_date, format_datetime, format_time
from html_datetime_local.model import Datetime, LocalDate, LocalTime
from html_datetime_local.parser import parse_date, parse_datetime, parse_time

T = TypeVar("T")


def _coercer(target: type[T], parse: Callable[[str], T]) -> Callable[[object], T]:
    def _coerce(value: object) -> T:
        if isinstance(value, target):
            return value
        if isinstance(value, str):
            return parse(value)
        raise ValueError(f"Expected a string, got {type(value).__name__}")

    return _coerce


LocalDatetimeField = Annotated[
    Datetime,
    PlainValidator(_coercer(Datetime, parse_datetime)),
    PlainSerializer(format_datetime, return_type=str),
    WithJsonSchema({"type": "string", "format": "datetime-local"}),
]

LocalDateField = Annotated[
    LocalDate,
    PlainValidator(_coercer(LocalDate, parse_date)),
    PlainSerializer(format_date, return_type=str),
    WithJsonSchema({"type": "string", "format": "date"}),
]

LocalTimeField = Annotated[
    LocalTime,
    PlainValidator(_coercer(LocalTime, parse_time)),
    PlainSerializer(format_time, return_type=str),
    WithJsonSchema({"type": "string", "format": "time"}),
]

__all__ = ["LocalDateField", "LocalDatetimeField", "LocalTimeField"]

"""SQLAlchemy column type persisting values as their canonical string."""

from __future__ import annotations

import logging

from sqlalchemy import Dialect, String, TypeDecorator

from html_datetime_local.errors import DatetimeParseError
from html_datetime_local.formatting import format_datetime
from html_datetime_local.model import Datetime
from html_datetime_local.parser import parse_datetime

log = logging.getLogger(__name__)

COLUMN_LENGTH = 64


class LocalDatetimeType(TypeDecorator[Datetime]):
    """Store a :class:`Datetime` as ``YYYY-MM-DDTHH:MM[:SS[.fff]]`` text.

    Bound strings are parsed first so invalid values never reach the database.
    """

    impl = String(COLUMN_LENGTH)
    cache_ok = True

    def process_bind_param(self, value: Datetime | str | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, str):
            value = parse_datetime(value)
        if not isinstance(value, Datetime):
            raise TypeError(f"Cannot store {type(value).__name__} as a local date and time")
        return format_datetime(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> Datetime | None:
        _ = dialect
        if value is None:
            return None
        try:
            return parse_datetime(value)
        except DatetimeParseError:
            log.debug("Stored local date and time %r is invalid", value)
            raise


__all__ = ["LocalDatetimeType"]

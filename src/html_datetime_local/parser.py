"""Public parsing entry points.

Each function scans ``text`` starting at ``start``, requires the rest of the
string to be consumed, then validates the scanned fields. Failures raise a
:class:`~html_datetime_local.errors.DatetimeParseError` subclass; nothing is
cached and no partial value is ever returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import DatetimeParseError
from .scanner import scan_date, scan_datetime, scan_time
from .validator import build_date, build_datetime, build_time

if TYPE_CHECKING:
    from .model import Datetime, LocalDate, LocalTime

log = logging.getLogger(__name__)


def parse_datetime(text: str, start: int = 0) -> Datetime:
    """Parse a local date and time string such as ``2023-12-31T23:59:59``.

    ``start`` selects where parsing begins inside a larger buffer; error offsets
    always refer to positions in ``text`` itself.
    """
    try:
        return build_datetime(scan_datetime(text, start))
    except DatetimeParseError as exc:
        log.debug("Rejected local date and time %r: %s", text[start:], exc)
        raise


def parse_date(text: str, start: int = 0) -> LocalDate:
    """Parse a date string such as ``2023-12-31``."""
    try:
        return build_date(scan_date(text, start))
    except DatetimeParseError as exc:
        log.debug("Rejected date %r: %s", text[start:], exc)
        raise


def parse_time(text: str, start: int = 0) -> LocalTime:
    """Parse a time string such as ``23:59`` or ``23:59:59.250``."""
    try:
        return build_time(scan_time(text, start))
    except DatetimeParseError as exc:
        log.debug("Rejected time %r: %s", text[start:], exc)
        raise


def is_valid_datetime(text: str) -> bool:
    try:
        parse_datetime(text)
    except DatetimeParseError:
        return False
    return True


__all__ = ["is_valid_datetime", "parse_date", "parse_datetime", "parse_time"]

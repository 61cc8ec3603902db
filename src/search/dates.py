"""Strict `dd/mm/yyyy` date parsing and the "today" clock.

Only real calendar dates in exactly this form are accepted: two-digit day and month, four-digit
year, no rollover (`31/04/2027` and `29/02/2025` are rejected).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo

import dateparser
from dateparser.conf import Settings as DateparserSettings

DATE_FORMAT = "%d/%m/%Y"

_DMY_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")

# Restrict dateparser to the explicit format; relative and free-form parsers stay off.
_DATEPARSER_SETTINGS = DateparserSettings().replace(
    PARSERS=["custom-formats"],
    STRICT_PARSING=True,
    RETURN_AS_TIMEZONE_AWARE=False,
)

Clock = Callable[[], date]


class InvalidDateError(ValueError):
    """Raised when a string is not an existing date in `dd/mm/yyyy` form."""


def parse_strict_dmy(text: str | None) -> date:
    """Parse a `dd/mm/yyyy` string into a calendar date.

    Raises:
        InvalidDateError: If the string has the wrong shape or names a non-existent day.
    """

    value = (text or "").strip()
    if not _DMY_RE.fullmatch(value):
        raise InvalidDateError(f"expected dd/mm/yyyy, got {value!r}")

    dt = dateparser.parse(
        value,
        date_formats=[DATE_FORMAT],
        languages=["en"],
        settings=_DATEPARSER_SETTINGS,
    )
    if dt is None:
        raise InvalidDateError(f"no such calendar date: {value!r}")
    return dt.date()


def format_dmy(value: date) -> str:
    """Serialize a date in canonical `dd/mm/yyyy` form."""

    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def local_today() -> date:
    return date.today()


def today_in(timezone: str) -> Clock:
    """Build a clock returning the current calendar date in an IANA timezone."""

    tz = ZoneInfo(timezone)

    def _today() -> date:
        return datetime.now(tz).date()

    return _today

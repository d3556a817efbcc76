"""Calendar date parsing shared by the schedule gateway, reports and prompts."""

from __future__ import annotations

import re
from datetime import date, datetime

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_calendar_date(value: object) -> date:
    """Parse the date part of an ISO date or datetime string.

    Any time-of-day suffix is dropped as-is; no time zone conversion.
    Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value[:10]):
        raise ValueError(f"not a calendar date: {value!r}")
    return date.fromisoformat(value[:10])


def parse_operator_date(value: str) -> date | None:
    """Strictly parse ``YYYY-MM-DD`` operator input; None if invalid."""
    value = value.strip()
    if not _ISO_DATE_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None

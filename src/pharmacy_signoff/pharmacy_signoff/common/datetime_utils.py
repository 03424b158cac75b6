from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def last_weekday_of_month(day: date) -> date:
    """Last Monday-Friday of the month that contains ``day``."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    candidate = day.replace(day=last_day)
    # Saturday=5, Sunday=6
    while candidate.weekday() >= 5:
        candidate -= timedelta(days=1)
    return candidate

"""Date helpers shared by links and queries.

Events and queries are compared at day resolution, so datetimes are
reduced to their calendar date before any comparison.
"""

from __future__ import annotations

from datetime import date, datetime

from .errors import require
from .settings import get_settings


def as_date(value: date | datetime) -> date:
    """Normalize a date or datetime to a calendar date."""
    require(date=value)
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(f"Expected a date, got {type(value).__name__}")
    return value


def parse_date(text: str, date_format: str | None = None) -> date:
    """Parse a date string such as "1/6/2014".

    Args:
        text: The date string
        date_format: strptime format (defaults to settings.date_format)

    Raises:
        ValueError: If the string does not match the format
    """
    require(text=text)
    fmt = date_format or get_settings().date_format
    return datetime.strptime(text.strip(), fmt).date()

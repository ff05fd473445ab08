from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.constants import MONTH_ABBR


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: Union[date, datetime, str]) -> date:
    """Normalize driver values (date, datetime or ISO string) into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value.strip()[:10])
    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def format_short_date(value: date) -> str:
    """Format like 'May 10, 2024' regardless of the process locale."""
    return f"{MONTH_ABBR[value.month - 1]} {value.day}, {value.year}"

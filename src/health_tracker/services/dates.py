"""Calendar helpers."""

import calendar
from datetime import date, datetime

from health_tracker.config import parse_timezone

DECEMBER = 12


def today_in(timezone_name: str | None) -> date:
    """Return the current date in the given timezone."""
    return datetime.now(tz=parse_timezone(timezone_name)).date()


def subtract_months(day: date, months: int) -> date:
    """Move back whole calendar months, clamping to the end of shorter months."""
    month_index = day.year * DECEMBER + (day.month - 1) - months
    year, month_zero = divmod(month_index, DECEMBER)
    month = month_zero + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))

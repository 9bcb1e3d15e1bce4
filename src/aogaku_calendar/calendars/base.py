"""
Civil Calendar Helpers

All calendar arithmetic runs on civil dates in one fixed timezone:
Japan Standard Time (UTC+09:00, no daylight saving). Callers may pass
timezone-aware datetimes from any zone; they are converted to JST first.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from ..models import ACADEMIC_YEAR_START_MONTH, DateRange


# Japan has not observed daylight saving time since 1951
CIVIL_TIMEZONE = timezone(timedelta(hours=9), "JST")

# ISO weekday numbers (Monday=1 ... Sunday=7)
ISO_MONDAY = 1
ISO_SUNDAY = 7

DateLike = Union[date, datetime]


def to_civil_date(value: DateLike) -> date:
    """
    Normalize a date or datetime to a civil date in JST.

    - date: returned unchanged
    - aware datetime: converted to JST, then truncated to its date
    - naive datetime: assumed to already be civil time

    Args:
        value: Date or datetime to normalize

    Returns:
        The civil calendar day
    """
    # datetime is a subclass of date, so it must be checked first
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(CIVIL_TIMEZONE)
        return value.date()
    return value


def civil_today(now: Optional[datetime] = None) -> date:
    """Get today's civil date in JST."""
    if now is None:
        now = datetime.now(timezone.utc)
    return to_civil_date(now)


def is_sunday(d: DateLike) -> bool:
    """Check if the civil date is a Sunday (ISO weekday 7)."""
    return to_civil_date(d).isoweekday() == ISO_SUNDAY


def academic_year_of(d: DateLike) -> int:
    """
    Get the academic-year key for a date.

    April onwards belongs to the current calendar year; January to
    March belongs to the previous one.
    """
    day = to_civil_date(d)
    if day.month >= ACADEMIC_YEAR_START_MONTH:
        return day.year
    return day.year - 1


def academic_year_span(academic_year: int) -> DateRange:
    """April 1 of the year to March 31 of the following year."""
    return DateRange(
        date(academic_year, ACADEMIC_YEAR_START_MONTH, 1),
        date(academic_year + 1, ACADEMIC_YEAR_START_MONTH, 1) - timedelta(days=1),
    )


def first_day_of_month(d: DateLike) -> date:
    """Get the first day of the date's civil month."""
    day = to_civil_date(d)
    return day.replace(day=1)


def add_months(d: DateLike, months: int) -> date:
    """
    Get the first day of the month ``months`` away from a date.

    Args:
        d: Any date in the starting month
        months: Number of months to move (can be negative)

    Returns:
        First day of the target month
    """
    first = first_day_of_month(d)
    index = first.year * 12 + (first.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)

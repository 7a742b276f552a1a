"""
Calendar-day helpers.
- Capacity math works on plain dates; time of day never matters.
- The calendar events service serializes dates as midnight UTC, so the
  calendar day is taken as written and never shifted into a local zone.
"""
import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Tuple, Union

DateLike = Union[date, datetime, str]


def as_date(value: DateLike) -> date:
    """Reduce a date, datetime or ISO-8601 string to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a date or ISO-8601 string, got {type(value).__name__}")
    return parse_iso_date(value)


def parse_iso_date(value: str) -> date:
    """
    Parse "2025-03-03", "2025-03-03T00:00:00", "2025-03-03T00:00:00Z" or
    "2025-03-03T00:00:00.0000000+00:00" into date(2025, 3, 3). Only the
    calendar day is read; the time and offset are ignored.

    Raises:
        ValueError: If the string is not ISO-8601
    """
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    # The calendar service writes seven fractional digits, which fromisoformat rejects before 3.11
    if len(text) > 10 and text[10] in "T ":
        return date.fromisoformat(text[:10])
    raise ValueError(f"Invalid ISO-8601 date: {value!r}")


def days_in_month(year: int, month: int) -> int:
    """Number of calendar days in a 1-based month"""
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of a 1-based month"""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, both inclusive"""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)

"""
Calendar engine - working days and hours per month

Counts working days against weekends, Brazilian national holidays and the
custom holidays published by the calendar events service. Every function is
pure: the same inputs always give the same result and nothing is cached.
"""
from datetime import date
from typing import Iterable, List, Set
from app.schemas.holiday import Holiday
from app.services.holiday_service import get_brazilian_national_holidays
from app.utils.datetime_utils import DateLike, as_date, iter_days, month_bounds
from app.utils.enums import HolidayType


def is_weekend(check_date: DateLike) -> bool:
    """Saturday or Sunday"""
    return as_date(check_date).weekday() >= 5  # Monday=0, Saturday=5, Sunday=6


def is_same_day(date1: DateLike, date2: DateLike) -> bool:
    """Same calendar day, ignoring time of day"""
    return as_date(date1) == as_date(date2)


def is_holiday(check_date: DateLike, holidays: Iterable[Holiday]) -> bool:
    """True if any holiday falls on check_date"""
    return any(is_same_day(holiday.date, check_date) for holiday in holidays)


def get_all_holidays(year: int, custom_holidays: Iterable[Holiday]) -> List[Holiday]:
    """
    National holidays of the year followed by the custom ones.

    Entries are not deduplicated: a custom holiday on a national holiday
    date shows up twice, but still blocks a single day.

    Args:
        year: Calendar year
        custom_holidays: Local holidays from the calendar events service

    Returns:
        Combined holiday list
    """
    national = [
        Holiday(
            id=f"national-{h.name}-{year}",
            name=h.name,
            date=h.date,
            type=HolidayType.NATIONAL,
        )
        for h in get_brazilian_national_holidays(year)
    ]
    return national + list(custom_holidays)


def _blocked_dates(year: int, custom_holidays: Iterable[Holiday]) -> Set[date]:
    return {as_date(h.date) for h in get_all_holidays(year, custom_holidays)}


def _count_working_days(start: date, end: date, blocked: Set[date]) -> int:
    return sum(
        1 for day in iter_days(start, end)
        if not is_weekend(day) and day not in blocked
    )


def get_working_days_in_month(
    month: int,
    year: int,
    custom_holidays: Iterable[Holiday]
) -> int:
    """
    Working days in a month: not Saturday/Sunday, not a national or custom holiday.

    Holidays on weekends reduce nothing further.

    Args:
        month: Month (1-12)
        year: Calendar year
        custom_holidays: Local holidays (national ones are added here)

    Returns:
        Number of working days
    """
    first_day, last_day = month_bounds(year, month)
    return _count_working_days(first_day, last_day, _blocked_dates(year, custom_holidays))


def get_monthly_capacity_hours(
    month: int,
    year: int,
    daily_hours: int,
    custom_holidays: Iterable[Holiday]
) -> int:
    """Working days x daily hours"""
    return get_working_days_in_month(month, year, custom_holidays) * daily_hours


def get_vacation_days_in_month(
    month: int,
    year: int,
    vacation_start: DateLike,
    vacation_end: DateLike,
    holidays: Iterable[Holiday]
) -> int:
    """
    Working days of a vacation that fall inside a month.

    The vacation range is clipped to the month; both ends are inclusive.
    Each month is evaluated on its own, so a vacation crossing months is
    split without any state carried between calls.

    Args:
        month: Month (1-12)
        year: Calendar year
        vacation_start: First vacation day
        vacation_end: Last vacation day
        holidays: Local holidays (national ones are added here)

    Returns:
        Number of vacation working days in the month (0 when no overlap)
    """
    month_start, month_end = month_bounds(year, month)
    effective_start = max(as_date(vacation_start), month_start)
    effective_end = min(as_date(vacation_end), month_end)

    if effective_start > effective_end:
        return 0

    return _count_working_days(effective_start, effective_end, _blocked_dates(year, holidays))


def get_vacation_hours_in_month(
    month: int,
    year: int,
    vacation_start: DateLike,
    vacation_end: DateLike,
    daily_hours: int,
    holidays: Iterable[Holiday]
) -> int:
    """Vacation working days in the month x daily hours"""
    return get_vacation_days_in_month(month, year, vacation_start, vacation_end, holidays) * daily_hours


def format_month_capacity(hours: int, working_days: int) -> str:
    return f"{hours}h ({working_days} dias úteis)"

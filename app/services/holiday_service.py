"""
Holiday calculator - Brazilian national holidays

National holidays are derived, never stored: 8 fixed-date holidays plus
3 moving holidays anchored on Easter Sunday. Nothing here performs I/O,
so national holidays are always available even when the calendar events
service is down.
"""
from datetime import date, timedelta
from typing import List, Optional
from app.schemas.holiday import (
    NationalHoliday,
    NationalHolidayCheck,
    HolidayHoursInMonth,
    HolidayHoursInYear,
)

# (name, month, day)
FIXED_HOLIDAYS = [
    ("Confraternização Universal", 1, 1),
    ("Tiradentes", 4, 21),
    ("Dia do Trabalho", 5, 1),
    ("Independência do Brasil", 9, 7),
    ("Nossa Senhora Aparecida", 10, 12),
    ("Finados", 11, 2),
    ("Proclamação da República", 11, 15),
    ("Natal", 12, 25),
]

# (name, days relative to Easter Sunday)
EASTER_BASED_HOLIDAYS = [
    ("Carnaval", -47),
    ("Sexta-feira Santa", -2),
    ("Corpus Christi", 60),
]


def calculate_easter_date(year: int) -> date:
    """
    Easter Sunday for a Gregorian year (Meeus/Jones/Butcher algorithm).

    Years before 1583 are not rejected, but the result is only meaningful
    for the Gregorian calendar.

    Args:
        year: Calendar year

    Returns:
        Date of Easter Sunday
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def get_brazilian_national_holidays(year: int) -> List[NationalHoliday]:
    """
    All Brazilian national holidays for a year, sorted by date.

    Args:
        year: Calendar year

    Returns:
        11 NationalHoliday entries (8 fixed + 3 Easter-based)
    """
    holidays = [
        NationalHoliday(name=name, date=date(year, month, day))
        for name, month, day in FIXED_HOLIDAYS
    ]

    easter = calculate_easter_date(year)
    holidays.extend(
        NationalHoliday(name=name, date=easter + timedelta(days=offset))
        for name, offset in EASTER_BASED_HOLIDAYS
    )

    holidays.sort(key=lambda h: h.date)
    return holidays


def is_national_holiday(check_date: date, year: Optional[int] = None) -> NationalHolidayCheck:
    """
    Check whether a date is a Brazilian national holiday

    Args:
        check_date: Date to check
        year: Year whose holidays are consulted (defaults to check_date.year)

    Returns:
        NationalHolidayCheck with the holiday name when found
    """
    y = year or check_date.year
    for holiday in get_brazilian_national_holidays(y):
        if holiday.date == check_date:
            return NationalHolidayCheck(is_holiday=True, name=holiday.name)
    return NationalHolidayCheck(is_holiday=False)


def _weekday_holidays(holidays: List[NationalHoliday]) -> List[NationalHoliday]:
    # Holidays on Saturday/Sunday cost no hours: nobody was scheduled that day
    return [h for h in holidays if h.date.weekday() < 5]


def get_national_holiday_hours_in_month(
    month: int,
    year: int,
    daily_hours: int = 8
) -> HolidayHoursInMonth:
    """
    Hours lost to national holidays falling on weekdays in a month

    Args:
        month: Month (1-12)
        year: Calendar year
        daily_hours: Working hours per day

    Returns:
        HolidayHoursInMonth with the total and the contributing holidays
    """
    holidays = _weekday_holidays(
        [h for h in get_brazilian_national_holidays(year) if h.date.month == month]
    )
    return HolidayHoursInMonth(total_hours=len(holidays) * daily_hours, holidays=holidays)


def get_national_holiday_hours_in_year(year: int, daily_hours: int = 8) -> HolidayHoursInYear:
    """
    Hours lost to national holidays falling on weekdays across a year

    Args:
        year: Calendar year
        daily_hours: Working hours per day

    Returns:
        HolidayHoursInYear with totals and the contributing holidays
    """
    holidays = _weekday_holidays(get_brazilian_national_holidays(year))
    return HolidayHoursInYear(
        total_hours=len(holidays) * daily_hours,
        total_days=len(holidays),
        holidays=holidays,
    )

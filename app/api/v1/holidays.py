"""
National holiday endpoints (computed, no external service involved)
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Path, Query
from app.core.config import settings
from app.schemas.holiday import (
    NationalHoliday,
    NationalHolidayCheck,
    HolidayHoursInMonth,
    HolidayHoursInYear,
)
from app.services.holiday_service import (
    calculate_easter_date,
    get_brazilian_national_holidays,
    is_national_holiday,
    get_national_holiday_hours_in_month,
    get_national_holiday_hours_in_year,
)

router = APIRouter()


@router.get("/national", response_model=List[NationalHoliday])
async def list_national_holidays(
    year: int = Query(..., ge=1, le=9999, description="Calendar year")
):
    """Brazilian national holidays of a year, sorted by date"""
    return get_brazilian_national_holidays(year)


@router.get("/national/check", response_model=NationalHolidayCheck)
async def check_national_holiday(
    check_date: date = Query(..., alias="date", description="Date to check (YYYY-MM-DD)")
):
    """Whether a date is a national holiday"""
    return is_national_holiday(check_date)


@router.get("/national/hours", response_model=HolidayHoursInYear)
async def national_holiday_hours_in_year(
    year: int = Query(..., ge=1, le=9999, description="Calendar year"),
    daily_hours: Optional[int] = Query(None, ge=1, le=24, description="Hours per working day")
):
    """Hours lost to weekday national holidays in a year"""
    return get_national_holiday_hours_in_year(year, daily_hours or settings.DEFAULT_DAILY_HOURS)


@router.get("/national/hours/{month}", response_model=HolidayHoursInMonth)
async def national_holiday_hours_in_month(
    month: int = Path(..., ge=1, le=12, description="Month (1-12)"),
    year: int = Query(..., ge=1, le=9999, description="Calendar year"),
    daily_hours: Optional[int] = Query(None, ge=1, le=24, description="Hours per working day")
):
    """Hours lost to weekday national holidays in a month"""
    return get_national_holiday_hours_in_month(month, year, daily_hours or settings.DEFAULT_DAILY_HOURS)


@router.get("/easter")
async def easter_date(
    year: int = Query(..., ge=1, le=9999, description="Calendar year")
):
    """Easter Sunday of a year"""
    return {"year": year, "date": calculate_easter_date(year)}

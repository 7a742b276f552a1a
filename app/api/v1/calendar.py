"""
Calendar endpoints: merged holidays, month working days and the custom
holiday cache
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from app.core.deps import get_department_id, get_holiday_cache
from app.schemas.calendar_event import YearCalendarSummary
from app.schemas.capacity import MonthInfo
from app.schemas.holiday import Holiday, HolidayCreate
from app.services.calendar_client import summarize_events
from app.services.calendar_engine import get_all_holidays
from app.services.capacity_service import get_month_info
from app.services.holiday_cache import HolidayCache

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{year}/holidays", response_model=List[Holiday])
async def list_all_holidays(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """National holidays followed by the custom ones of the year"""
    custom = await cache.get_holidays(year, department_id)
    return get_all_holidays(year, custom)


@router.get("/{year}/custom-holidays", response_model=List[Holiday])
async def list_custom_holidays(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Custom holidays of the year (from the calendar events service)"""
    return await cache.get_holidays(year, department_id)


@router.post("/{year}/custom-holidays", response_model=Holiday, status_code=201)
async def add_custom_holiday(
    holiday_data: HolidayCreate,
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Add a local holiday to the cached year until the next refresh"""
    if holiday_data.date.year != year:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Date {holiday_data.date} does not fall within year {year}"
        )
    holiday = await cache.add_holiday(
        year,
        holiday_data.name,
        holiday_data.date,
        holiday_id=holiday_data.id,
        department_id=department_id,
    )
    logger.info("Added custom holiday %s on %s", holiday.id, holiday.date)
    return holiday


@router.delete("/{year}/custom-holidays/{holiday_id}", status_code=204)
async def remove_custom_holiday(
    holiday_id: str,
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Remove a cached custom holiday"""
    if not cache.remove_holiday(year, holiday_id, department_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Holiday with id {holiday_id} not found in {year}"
        )
    return Response(status_code=204)


@router.post("/{year}/refresh", response_model=List[Holiday])
async def refresh_custom_holidays(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Reload the year's events from the calendar events service"""
    return await cache.refresh(year, department_id)


@router.get("/{year}/summary", response_model=YearCalendarSummary, response_model_by_alias=False)
async def year_summary(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Event counts per type and hours lost for the year"""
    events = await cache.get_events(year, department_id)
    return summarize_events(year, events)


@router.get("/{year}/months", response_model=List[MonthInfo])
async def list_month_info(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Working days and hours of every month of the year"""
    custom = await cache.get_holidays(year, department_id)
    return [get_month_info(month, year, custom) for month in range(1, 13)]


@router.get("/{year}/months/{month}", response_model=MonthInfo)
async def month_info(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    month: int = Path(..., ge=1, le=12, description="Month (1-12)"),
    department_id: Optional[str] = Depends(get_department_id),
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Working days and hours of one month"""
    custom = await cache.get_holidays(year, department_id)
    return get_month_info(month, year, custom)

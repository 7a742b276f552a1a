"""
Capacity endpoints
"""
from typing import List
from fastapi import APIRouter, Depends
from app.core.deps import get_holiday_cache
from app.schemas.capacity import (
    MonthCapacityRequest,
    MonthCapacityOut,
    YearCapacityRequest,
    TeamCapacityRequest,
    TeamCapacitySummary,
)
from app.services.calendar_engine import format_month_capacity
from app.services.capacity_service import (
    get_month_capacity,
    get_team_capacity_summary,
    is_on_vacation,
)
from app.services.holiday_cache import HolidayCache

router = APIRouter()


def _month_out(employee_id: str, month: int, year: int, capacity) -> MonthCapacityOut:
    return MonthCapacityOut(
        employee_id=employee_id,
        month=month,
        year=year,
        capacity=capacity,
        is_on_vacation=is_on_vacation(capacity),
        summary=format_month_capacity(capacity.available_hours, capacity.working_days),
    )


@router.post("/month", response_model=MonthCapacityOut)
async def month_capacity(
    request: MonthCapacityRequest,
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Capacity of one employee for one month"""
    custom = await cache.get_holidays(request.year, request.department_id)
    capacity = get_month_capacity(request.month, request.year, request.employee, custom)
    return _month_out(request.employee.id, request.month, request.year, capacity)


@router.post("/year", response_model=List[MonthCapacityOut])
async def year_capacity(
    request: YearCapacityRequest,
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Capacity of one employee for every month of a year"""
    custom = await cache.get_holidays(request.year, request.department_id)
    return [
        _month_out(
            request.employee.id,
            month,
            request.year,
            get_month_capacity(month, request.year, request.employee, custom),
        )
        for month in range(1, 13)
    ]


@router.post("/team", response_model=TeamCapacitySummary)
async def team_capacity(
    request: TeamCapacityRequest,
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Total, fixed and available hours of a group of employees for one month"""
    custom = await cache.get_holidays(request.year, request.department_id)
    return get_team_capacity_summary(request.employees, request.month, request.year, custom)

"""
Allocation admission endpoints

Allocations themselves are stored by the planning backend; these endpoints
only decide whether a new one fits.
"""
from fastapi import APIRouter, Depends
from app.core.deps import get_holiday_cache
from app.schemas.allocation import (
    AllocationDecision,
    AllocationValidationRequest,
    OverloadReport,
    OverloadRequest,
)
from app.services.capacity_service import get_overload_report, validate_allocation
from app.services.holiday_cache import HolidayCache

router = APIRouter()


@router.post("/validate", response_model=AllocationDecision)
async def validate_allocation_endpoint(
    request: AllocationValidationRequest,
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """
    Check a new allocation against the employee's remaining capacity

    Always answers 200; `accepted` tells whether the allocation may be saved.
    """
    custom = await cache.get_holidays(request.year, request.department_id)
    return validate_allocation(
        request.employee,
        request.month,
        request.year,
        request.hours,
        request.existing_allocations,
        custom,
        demand_id=request.demand_id,
        project_id=request.project_id,
        demand_team_id=request.demand_team_id,
    )


@router.post("/overloaded", response_model=OverloadReport)
async def overloaded_employees(
    request: OverloadRequest,
    cache: HolidayCache = Depends(get_holiday_cache)
):
    """Employees whose booked hours exceed their capacity in any month of the year"""
    custom = await cache.get_holidays(request.year, request.department_id)
    return get_overload_report(request.employees, request.year, request.allocations, custom)

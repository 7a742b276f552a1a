"""
Capacity resolver - available hours per employee per month and the
allocation admission gate
"""
import logging
from typing import Iterable, List, Optional
from app.core.config import settings
from app.core.constants import month_label
from app.schemas.allocation import (
    Allocation,
    AllocationBreakdown,
    AllocationDecision,
    OverloadedEmployee,
    OverloadReport,
    RejectionReason,
)
from app.schemas.capacity import (
    EmployeeMonthData,
    MonthCapacityInfo,
    MonthInfo,
    TeamCapacitySummary,
)
from app.schemas.employee import Employee
from app.schemas.holiday import Holiday
from app.services.calendar_engine import (
    get_monthly_capacity_hours,
    get_vacation_hours_in_month,
    get_working_days_in_month,
)

logger = logging.getLogger(__name__)


def resolve_daily_hours(employee: Employee, default_daily_hours: Optional[int] = None) -> int:
    """Employee daily hours, or the global default when unset or zero"""
    return employee.daily_hours or default_daily_hours or settings.DEFAULT_DAILY_HOURS


def get_month_capacity(
    month: int,
    year: int,
    employee: Employee,
    custom_holidays: Iterable[Holiday] = (),
    default_daily_hours: Optional[int] = None
) -> MonthCapacityInfo:
    """
    Capacity of an employee for one month.

    available = max(0, working_days x daily_hours - vacation_hours - fixed_hours)

    Vacation periods are summed independently, so two overlapping periods
    of the same employee subtract their shared days twice. Fixed
    allocations are subtracted in full whatever the number of working days.

    Args:
        month: Month (1-12)
        year: Calendar year
        employee: Employee with vacations and fixed allocations
        custom_holidays: Local holidays for the year
        default_daily_hours: Fallback when employee.daily_hours is unset

    Returns:
        MonthCapacityInfo
    """
    custom_holidays = list(custom_holidays)
    daily_hours = resolve_daily_hours(employee, default_daily_hours)
    working_days = get_working_days_in_month(month, year, custom_holidays)
    total_hours = working_days * daily_hours

    vacation_hours = sum(
        get_vacation_hours_in_month(
            month,
            year,
            vacation.start_date,
            vacation.end_date,
            daily_hours,
            custom_holidays,
        )
        for vacation in employee.vacations
    )

    fixed_hours = employee.fixed_hours

    return MonthCapacityInfo(
        working_days=working_days,
        total_hours=total_hours,
        vacation_hours=vacation_hours,
        fixed_hours=fixed_hours,
        available_hours=max(0, total_hours - vacation_hours - fixed_hours),
    )


def get_year_capacity(
    year: int,
    employee: Employee,
    custom_holidays: Iterable[Holiday] = (),
    default_daily_hours: Optional[int] = None
) -> List[MonthCapacityInfo]:
    """Month capacities for January..December"""
    custom_holidays = list(custom_holidays)
    return [
        get_month_capacity(month, year, employee, custom_holidays, default_daily_hours)
        for month in range(1, 13)
    ]


def get_month_info(
    month: int,
    year: int,
    custom_holidays: Iterable[Holiday] = (),
    daily_hours: Optional[int] = None
) -> MonthInfo:
    """Working days and hours of a month at the global daily hours"""
    custom_holidays = list(custom_holidays)
    hours_per_day = daily_hours or settings.DEFAULT_DAILY_HOURS
    return MonthInfo(
        month=month,
        year=year,
        working_days=get_working_days_in_month(month, year, custom_holidays),
        total_hours=get_monthly_capacity_hours(month, year, hours_per_day, custom_holidays),
        label=month_label(month),
    )


def is_on_vacation(capacity: MonthCapacityInfo, threshold: Optional[float] = None) -> bool:
    """
    Whole-month vacation display rule: vacation takes at least half of the
    month's capacity. Such months refuse new allocations.

    A month with no working days at all also counts as vacation (0 >= 0).
    """
    ratio = threshold if threshold is not None else settings.VACATION_MONTH_THRESHOLD
    return capacity.vacation_hours >= capacity.total_hours * ratio


def is_loan(employee: Employee, demand_team_id: Optional[str]) -> bool:
    """An employee booked on a demand owned by another team is on loan"""
    if demand_team_id is None or employee.team_id is None:
        return False
    return employee.team_id != demand_team_id


def _allocations_for(
    allocations: Iterable[Allocation],
    employee_id: str,
    month: int,
    year: int
) -> List[Allocation]:
    return [
        a for a in allocations
        if a.employee_id == employee_id and a.month == month and a.year == year
    ]


def get_employee_month_data(
    employee: Employee,
    month: int,
    year: int,
    allocations: Iterable[Allocation] = (),
    custom_holidays: Iterable[Holiday] = ()
) -> EmployeeMonthData:
    """Capacity, booked allocations and vacation flag for one timeline cell"""
    capacity = get_month_capacity(month, year, employee, custom_holidays)
    month_allocations = _allocations_for(allocations, employee.id, month, year)
    return EmployeeMonthData(
        employee_id=employee.id,
        month=month,
        year=year,
        capacity=capacity,
        allocations=month_allocations,
        total_allocated=sum(a.hours for a in month_allocations),
        is_on_vacation=is_on_vacation(capacity),
        blocked_hours=capacity.fixed_hours + capacity.vacation_hours,
    )


def validate_allocation(
    employee: Employee,
    month: int,
    year: int,
    hours: int,
    existing_allocations: Iterable[Allocation] = (),
    custom_holidays: Iterable[Holiday] = (),
    demand_id: Optional[str] = None,
    project_id: Optional[str] = None,
    demand_team_id: Optional[str] = None
) -> AllocationDecision:
    """
    Admission gate for a new allocation.

    A request is rejected when the month is a vacation month or when the
    hours already booked plus the new hours exceed the available hours.
    Rejections are returned, not raised; callers must not persist a
    rejected allocation.
    An accepted decision carries the Allocation to persist.

    Args:
        employee: Employee receiving the hours
        month: Month (1-12)
        year: Calendar year
        hours: Requested hours
        existing_allocations: Allocations already booked (any employee/month; filtered here)
        custom_holidays: Local holidays for the year
        demand_id: Demand receiving the hours
        project_id: Project of the demand
        demand_team_id: Team owning the demand; a different team than the
            employee's makes the allocation a loan

    Returns:
        AllocationDecision
    """
    data = get_employee_month_data(employee, month, year, existing_allocations, custom_holidays)
    capacity = data.capacity
    daily_hours = resolve_daily_hours(employee)
    loan = is_loan(employee, demand_team_id)
    available = capacity.available_hours
    current = data.total_allocated

    breakdown = AllocationBreakdown(
        working_days=capacity.working_days,
        daily_hours=daily_hours,
        total_hours=capacity.total_hours,
        blocked_hours=data.blocked_hours,
        available_hours=available,
    )

    def reject(reason: RejectionReason, message: str, excess: int = 0) -> AllocationDecision:
        logger.info(
            "Allocation rejected: employee=%s %02d/%d hours=%s reason=%s",
            employee.id, month, year, hours, reason.value,
        )
        return AllocationDecision(
            accepted=False,
            reason=reason,
            requested_hours=hours,
            current_allocated=current,
            available_hours=available,
            remaining_hours=available - current,
            excess_hours=excess,
            breakdown=breakdown,
            is_loan=loan,
            message=message,
        )

    if hours <= 0:
        return reject(RejectionReason.INVALID_HOURS, "Insira um valor válido de horas")

    if data.is_on_vacation:
        return reject(RejectionReason.ON_VACATION, "Não é possível alocar durante período de férias")

    new_total = current + hours
    if new_total > available:
        excess = new_total - available
        remaining = available - current
        message = (
            f"Não é possível alocar {hours}h. {month_label(month)} tem apenas {remaining}h disponíveis "
            f"({capacity.working_days} dias úteis × {daily_hours}h - {data.blocked_hours}h bloqueadas). "
            f"Excesso: {excess}h."
        )
        return reject(RejectionReason.EXCEEDS_CAPACITY, message, excess)

    allocation = Allocation(
        employee_id=employee.id,
        demand_id=demand_id,
        project_id=project_id,
        month=month,
        year=year,
        hours=hours,
        is_loan=loan,
        source_team_id=employee.team_id if loan else None,
    )
    message = f"{hours}h alocadas"
    if loan:
        message += f" (empréstimo de {employee.team_id})"

    return AllocationDecision(
        accepted=True,
        requested_hours=hours,
        current_allocated=current,
        available_hours=available,
        remaining_hours=available - new_total,
        breakdown=breakdown,
        is_loan=loan,
        allocation=allocation,
        message=message,
    )


def find_overloaded_months(
    employee: Employee,
    year: int,
    allocations: Iterable[Allocation] = (),
    custom_holidays: Iterable[Holiday] = ()
) -> List[int]:
    """Months (1-12) whose booked hours exceed the employee's available hours"""
    allocations = list(allocations)
    custom_holidays = list(custom_holidays)
    overloaded = []
    for month in range(1, 13):
        booked = sum(a.hours for a in _allocations_for(allocations, employee.id, month, year))
        if booked > get_month_capacity(month, year, employee, custom_holidays).available_hours:
            overloaded.append(month)
    return overloaded


def get_overload_report(
    employees: Iterable[Employee],
    year: int,
    allocations: Iterable[Allocation] = (),
    custom_holidays: Iterable[Holiday] = ()
) -> OverloadReport:
    """Employees with at least one overloaded month in the year"""
    allocations = list(allocations)
    custom_holidays = list(custom_holidays)
    overloaded = []
    for employee in employees:
        months = find_overloaded_months(employee, year, allocations, custom_holidays)
        if months:
            overloaded.append(OverloadedEmployee(employee_id=employee.id, months=months))
    return OverloadReport(year=year, overloaded_count=len(overloaded), employees=overloaded)


def get_team_capacity_summary(
    employees: Iterable[Employee],
    month: int,
    year: int,
    custom_holidays: Iterable[Holiday] = ()
) -> TeamCapacitySummary:
    """Total, fixed and available hours of a team for one month"""
    employees = list(employees)
    custom_holidays = list(custom_holidays)
    capacities = [get_month_capacity(month, year, e, custom_holidays) for e in employees]
    return TeamCapacitySummary(
        month=month,
        year=year,
        employee_count=len(employees),
        total_capacity=sum(c.total_hours for c in capacities),
        total_fixed_hours=sum(e.fixed_hours for e in employees),
        total_available=sum(c.available_hours for c in capacities),
    )

"""
Tests for month capacity and the allocation admission gate
"""
import pytest
from datetime import date
from app.schemas.allocation import Allocation, RejectionReason
from app.schemas.capacity import MonthCapacityInfo
from app.schemas.employee import Employee, FixedAllocation, VacationPeriod
from app.schemas.holiday import Holiday
from app.services.capacity_service import (
    get_month_capacity,
    get_year_capacity,
    get_month_info,
    is_on_vacation,
    get_employee_month_data,
    validate_allocation,
    find_overloaded_months,
    get_overload_report,
    get_team_capacity_summary,
)


def booked(employee_id: str, month: int, year: int, hours: int, demand_id: str = "dem-1") -> Allocation:
    return Allocation(employee_id=employee_id, demand_id=demand_id, project_id="proj-1", month=month, year=year, hours=hours)


def test_capacity_with_fixed_allocation(analyst):
    """22 working days x 8h = 176h, minus 40h fixed = 136h"""
    capacity = get_month_capacity(8, 2024, analyst)
    assert capacity == MonthCapacityInfo(
        working_days=22,
        total_hours=176,
        vacation_hours=0,
        fixed_hours=40,
        available_hours=136,
    )


def test_capacity_subtracts_vacation(vacationing_employee):
    capacity = get_month_capacity(7, 2024, vacationing_employee)
    assert capacity.working_days == 23
    assert capacity.vacation_hours == 88
    assert capacity.available_hours == 184 - 88


def test_capacity_uses_custom_holidays(analyst):
    custom = [Holiday(id="evt-1", name="Aniversário da Cidade", date=date(2024, 8, 15))]
    capacity = get_month_capacity(8, 2024, analyst, custom)
    assert capacity.working_days == 21
    assert capacity.available_hours == 168 - 40


@pytest.mark.parametrize("daily_hours", [None, 0])
def test_missing_daily_hours_fall_back_to_default(daily_hours):
    employee = Employee(id="emp-9", name="Sem jornada", daily_hours=daily_hours)
    assert get_month_capacity(8, 2024, employee).total_hours == 176


def test_explicit_default_daily_hours():
    employee = Employee(id="emp-9", name="Sem jornada", daily_hours=None)
    assert get_month_capacity(8, 2024, employee, default_daily_hours=6).total_hours == 132


def test_part_time_daily_hours():
    employee = Employee(id="emp-3", name="Meio período", daily_hours=4)
    assert get_month_capacity(8, 2024, employee).total_hours == 88


def test_available_hours_never_negative():
    employee = Employee(
        id="emp-4",
        name="Sobrecarregado",
        fixed_allocations=[FixedAllocation(id="fa-1", name="Suporte", hours_per_month=300)],
    )
    capacity = get_month_capacity(8, 2024, employee)
    assert capacity.available_hours == 0
    assert capacity.fixed_hours == 300


def test_month_without_working_days_has_zero_available(analyst):
    custom = [Holiday(id=f"hol-{d}", name="Recesso", date=date(2024, 8, d)) for d in range(1, 32)]
    capacity = get_month_capacity(8, 2024, analyst, custom)
    assert capacity.working_days == 0
    assert capacity.total_hours == 0
    assert capacity.available_hours == 0


def test_capacity_is_idempotent(vacationing_employee):
    first = get_month_capacity(7, 2024, vacationing_employee)
    second = get_month_capacity(7, 2024, vacationing_employee)
    assert first == second


def test_vacation_crossing_months_is_split():
    employee = Employee(
        id="emp-5",
        name="Férias de fim de ano",
        vacations=[VacationPeriod(id="vac-1", start_date=date(2024, 12, 20), end_date=date(2025, 1, 5))],
    )
    assert get_month_capacity(12, 2024, employee).vacation_hours == 56
    assert get_month_capacity(1, 2025, employee).vacation_hours == 16


def test_overlapping_vacations_are_summed_independently():
    """Overlapping periods subtract their shared days twice"""
    employee = Employee(
        id="emp-6",
        name="Férias duplicadas",
        vacations=[
            VacationPeriod(id="vac-1", start_date=date(2024, 8, 5), end_date=date(2024, 8, 9)),
            VacationPeriod(id="vac-2", start_date=date(2024, 8, 5), end_date=date(2024, 8, 9)),
        ],
    )
    assert get_month_capacity(8, 2024, employee).vacation_hours == 80


def test_year_capacity_has_twelve_months(analyst):
    months = get_year_capacity(2024, analyst)
    assert len(months) == 12
    assert months[7].available_hours == 136


def test_month_info():
    info = get_month_info(11, 2024)
    assert info.month == 11
    assert info.working_days == 20
    assert info.total_hours == 160
    assert info.label == "Nov"


def test_vacation_threshold_boundary():
    at_threshold = MonthCapacityInfo(working_days=22, total_hours=176, vacation_hours=88, fixed_hours=0, available_hours=88)
    one_hour_under = MonthCapacityInfo(working_days=22, total_hours=176, vacation_hours=87, fixed_hours=0, available_hours=89)
    assert is_on_vacation(at_threshold) is True
    assert is_on_vacation(one_hour_under) is False


def test_half_month_vacation_marks_month():
    employee = Employee(
        id="emp-7",
        name="Quinzena",
        vacations=[VacationPeriod(id="vac-1", start_date=date(2024, 8, 1), end_date=date(2024, 8, 15))],
    )
    data = get_employee_month_data(employee, 8, 2024)
    assert data.capacity.vacation_hours == 88
    assert data.is_on_vacation is True


def test_employee_month_data_filters_allocations(analyst):
    allocations = [
        booked("emp-1", 8, 2024, 30),
        booked("emp-1", 8, 2024, 20, demand_id="dem-2"),
        booked("emp-1", 9, 2024, 50),
        booked("emp-2", 8, 2024, 70),
        booked("emp-1", 8, 2025, 10),
    ]
    data = get_employee_month_data(analyst, 8, 2024, allocations)
    assert data.total_allocated == 50
    assert len(data.allocations) == 2
    assert data.blocked_hours == 40
    assert data.is_on_vacation is False


def test_allocation_over_capacity_rejected(analyst):
    decision = validate_allocation(analyst, 8, 2024, 140)
    assert decision.accepted is False
    assert decision.reason == RejectionReason.EXCEEDS_CAPACITY
    assert decision.excess_hours == 4
    assert decision.available_hours == 136
    assert decision.remaining_hours == 136
    assert decision.breakdown.working_days == 22
    assert decision.breakdown.daily_hours == 8
    assert decision.breakdown.blocked_hours == 40
    assert "Excesso: 4h" in decision.message
    assert "22 dias úteis × 8h - 40h bloqueadas" in decision.message


def test_allocation_filling_capacity_accepted(analyst):
    decision = validate_allocation(analyst, 8, 2024, 136)
    assert decision.accepted is True
    assert decision.reason is None
    assert decision.remaining_hours == 0
    assert decision.excess_hours == 0


def test_allocation_counts_existing_bookings(analyst):
    existing = [booked("emp-1", 8, 2024, 100)]
    decision = validate_allocation(analyst, 8, 2024, 40, existing)
    assert decision.accepted is False
    assert decision.current_allocated == 100
    assert decision.remaining_hours == 36
    assert decision.excess_hours == 4
    assert "Ago tem apenas 36h disponíveis" in decision.message


def test_allocation_ignores_other_months(analyst):
    existing = [booked("emp-1", 9, 2024, 136), booked("emp-2", 8, 2024, 136)]
    assert validate_allocation(analyst, 8, 2024, 136, existing).accepted is True


def test_allocation_during_vacation_refused():
    employee = Employee(
        id="emp-7",
        name="Quinzena",
        vacations=[VacationPeriod(id="vac-1", start_date=date(2024, 8, 1), end_date=date(2024, 8, 15))],
    )
    decision = validate_allocation(employee, 8, 2024, 8)
    assert decision.accepted is False
    assert decision.reason == RejectionReason.ON_VACATION


def test_vacation_below_half_month_still_allocatable(vacationing_employee):
    """July 2024: 88h of vacation against 184h is under half the month"""
    decision = validate_allocation(vacationing_employee, 7, 2024, 8)
    assert decision.accepted is True
    assert decision.available_hours == 96



def test_allocation_on_other_team_demand_is_loan(analyst):
    decision = validate_allocation(
        analyst, 8, 2024, 40, demand_id="dem-9", project_id="prj-3", demand_team_id="team-financeiro"
    )
    assert decision.accepted is True
    assert decision.is_loan is True
    assert decision.message == "40h alocadas (empréstimo de team-contabil)"
    assert decision.allocation == Allocation(
        employee_id="emp-1",
        demand_id="dem-9",
        project_id="prj-3",
        month=8,
        year=2024,
        hours=40,
        is_loan=True,
        source_team_id="team-contabil",
    )


@pytest.mark.parametrize("demand_team_id", ["team-contabil", None])
def test_allocation_on_own_team_demand_is_not_loan(analyst, demand_team_id):
    decision = validate_allocation(analyst, 8, 2024, 40, demand_id="dem-1", demand_team_id=demand_team_id)
    assert decision.is_loan is False
    assert decision.message == "40h alocadas"
    assert decision.allocation.is_loan is False
    assert decision.allocation.source_team_id is None
    assert decision.allocation.demand_id == "dem-1"


def test_rejected_loan_carries_no_allocation(analyst):
    decision = validate_allocation(analyst, 8, 2024, 140, demand_team_id="team-financeiro")
    assert decision.accepted is False
    assert decision.is_loan is True
    assert decision.allocation is None


@pytest.mark.parametrize("hours", [0, -8])
def test_allocation_with_invalid_hours_refused(analyst, hours):
    decision = validate_allocation(analyst, 8, 2024, hours)
    assert decision.accepted is False
    assert decision.reason == RejectionReason.INVALID_HOURS


def test_find_overloaded_months(analyst):
    allocations = [
        booked("emp-1", 8, 2024, 137),
        booked("emp-1", 11, 2024, 120),
        booked("emp-1", 11, 2024, 10),
    ]
    # November: 20 days x 8h - 40h = 120h available
    assert find_overloaded_months(analyst, 2024, allocations) == [8, 11]


def test_overload_report(analyst, vacationing_employee):
    allocations = [booked("emp-2", 7, 2024, 100), booked("emp-1", 8, 2024, 100)]
    report = get_overload_report([analyst, vacationing_employee], 2024, allocations)
    assert report.overloaded_count == 1
    assert report.employees[0].employee_id == "emp-2"
    assert report.employees[0].months == [7]


def test_team_capacity_summary(analyst, vacationing_employee):
    summary = get_team_capacity_summary([analyst, vacationing_employee], 8, 2024)
    assert summary.employee_count == 2
    assert summary.total_capacity == 352
    assert summary.total_fixed_hours == 40
    assert summary.total_available == 136 + 176

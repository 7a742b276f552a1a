"""
Capacity schemas
"""
from typing import Optional, List
from pydantic import BaseModel, Field
from app.schemas.employee import Employee
from app.schemas.allocation import Allocation


class MonthCapacityInfo(BaseModel):
    """Capacity of one employee in one month. Derived, never persisted."""
    working_days: int
    total_hours: int
    vacation_hours: int
    fixed_hours: int
    available_hours: int


class MonthInfo(BaseModel):
    """Employee-independent view of a month at the global daily hours"""
    month: int
    year: int
    working_days: int
    total_hours: int
    label: str


class EmployeeMonthData(BaseModel):
    """Capacity plus the allocations already booked for one employee and month"""
    employee_id: str
    month: int
    year: int
    capacity: MonthCapacityInfo
    allocations: List[Allocation] = Field(default_factory=list)
    total_allocated: int
    is_on_vacation: bool
    blocked_hours: int


class MonthCapacityRequest(BaseModel):
    employee: Employee
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=1, le=9999)
    department_id: Optional[str] = None


class MonthCapacityOut(BaseModel):
    employee_id: str
    month: int
    year: int
    capacity: MonthCapacityInfo
    is_on_vacation: bool
    summary: str


class YearCapacityRequest(BaseModel):
    employee: Employee
    year: int = Field(..., ge=1, le=9999)
    department_id: Optional[str] = None


class TeamCapacityRequest(BaseModel):
    employees: List[Employee]
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=1, le=9999)
    department_id: Optional[str] = None


class TeamCapacitySummary(BaseModel):
    month: int
    year: int
    employee_count: int
    total_capacity: int
    total_fixed_hours: int
    total_available: int

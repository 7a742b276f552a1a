"""
Employee schemas

Employees are owned by the planning backend; the capacity engine only
receives them as plain data.
"""
from datetime import date
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator
from app.utils.datetime_utils import as_date
from app.utils.enums import EmployeeRole


class VacationPeriod(BaseModel):
    """Inclusive calendar-date range; weekdays are filtered only when intersected with a month"""
    id: str
    start_date: date
    end_date: date

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _calendar_day(cls, v):
        return as_date(v)


class FixedAllocation(BaseModel):
    """Recurring monthly hour deduction (standing meetings, support rotations...)"""
    id: str
    name: str
    hours_per_month: int = Field(..., ge=0)


class Employee(BaseModel):
    id: str
    name: str
    role: EmployeeRole = Field(EmployeeRole.OTHER, description="Accepts legacy spellings such as 'Gerente' or '1'")
    team_id: Optional[str] = None
    daily_hours: Optional[int] = Field(8, ge=0, le=24, description="0 or null falls back to the global default")
    vacations: List[VacationPeriod] = Field(default_factory=list)
    fixed_allocations: List[FixedAllocation] = Field(default_factory=list)

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, v):
        return EmployeeRole.parse(v)

    @property
    def fixed_hours(self) -> int:
        return sum(fa.hours_per_month for fa in self.fixed_allocations)

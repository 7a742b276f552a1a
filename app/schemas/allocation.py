"""
Allocation schemas
"""
import enum
from typing import Optional, List
from pydantic import BaseModel, Field
from app.schemas.employee import Employee


class Allocation(BaseModel):
    """Hours of one employee booked on a demand for one month"""
    id: Optional[str] = None
    employee_id: str
    demand_id: Optional[str] = None
    project_id: Optional[str] = None
    month: int = Field(..., ge=1, le=12)
    year: int
    hours: int = Field(..., ge=0)
    is_loan: bool = Field(False, description="Employee booked on a demand of another team")
    source_team_id: Optional[str] = Field(None, description="Lending team, set only for loans")


class RejectionReason(str, enum.Enum):
    INVALID_HOURS = "invalid_hours"
    ON_VACATION = "on_vacation"
    EXCEEDS_CAPACITY = "exceeds_capacity"


class AllocationBreakdown(BaseModel):
    """Explains the available figure: working_days x daily_hours - blocked_hours"""
    working_days: int
    daily_hours: int
    total_hours: int
    blocked_hours: int
    available_hours: int


class AllocationDecision(BaseModel):
    """Outcome of the admission gate. Rejected allocations must not be persisted."""
    accepted: bool
    reason: Optional[RejectionReason] = None
    requested_hours: int
    current_allocated: int
    available_hours: int
    remaining_hours: int = Field(..., description="Hours still free after this request if accepted, before it otherwise")
    excess_hours: int = 0
    breakdown: AllocationBreakdown
    is_loan: bool = False
    allocation: Optional[Allocation] = Field(None, description="Record to persist; only set when accepted")
    message: str


class AllocationValidationRequest(BaseModel):
    employee: Employee
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=1, le=9999)
    hours: int
    demand_id: Optional[str] = None
    project_id: Optional[str] = None
    demand_team_id: Optional[str] = Field(None, description="Team owning the demand; differs from the employee's team on a loan")
    existing_allocations: List[Allocation] = Field(default_factory=list)
    department_id: Optional[str] = None


class OverloadRequest(BaseModel):
    employees: List[Employee]
    year: int = Field(..., ge=1, le=9999)
    allocations: List[Allocation] = Field(default_factory=list)
    department_id: Optional[str] = None


class OverloadedEmployee(BaseModel):
    employee_id: str
    months: List[int]


class OverloadReport(BaseModel):
    year: int
    overloaded_count: int
    employees: List[OverloadedEmployee]

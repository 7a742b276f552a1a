"""
Calendar events service wire schemas

The external service speaks camelCase JSON; fields accept both the alias
and the Python name.
"""
from datetime import date as date_type
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator
from app.utils.datetime_utils import as_date
from app.utils.enums import CalendarEventType


class CalendarEvent(BaseModel):
    """Organizational calendar event (holiday, bridge day, recess, optional day)"""
    id: str
    name: str
    date: date_type
    type: CalendarEventType = CalendarEventType.HOLIDAY
    type_label: Optional[str] = Field(None, alias="typeLabel")
    description: Optional[str] = None
    hours_lost: int = Field(8, alias="hoursLost")
    is_company_wide: bool = Field(True, alias="isCompanyWide")
    department_id: Optional[str] = Field(None, alias="departmentId")
    department_name: Optional[str] = Field(None, alias="departmentName")
    year: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", "department_id", mode="before")
    @classmethod
    def _stringify_ids(cls, v):
        return str(v) if v is not None else None

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_day(cls, v):
        return as_date(v)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v):
        return CalendarEventType.parse(v)


class CalendarEventListResponse(BaseModel):
    events: List[CalendarEvent] = Field(default_factory=list)
    total_count: int = Field(0, alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)


class YearCalendarSummary(BaseModel):
    year: int
    total_holidays: int = Field(0, alias="totalHolidays")
    total_bridge_days: int = Field(0, alias="totalBridgeDays")
    total_recess_days: int = Field(0, alias="totalRecessDays")
    total_optional_days: int = Field(0, alias="totalOptionalDays")
    total_hours_lost: int = Field(0, alias="totalHoursLost")
    events: List[CalendarEvent] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

"""
Holiday schemas
"""
from datetime import date as date_type
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict
from app.utils.enums import HolidayType


class Holiday(BaseModel):
    """A non-working calendar day, national (derived) or local (from the calendar service)"""
    id: str = Field(..., description="Holiday id; national holidays use national-<name>-<year>")
    name: str = Field(..., description="Holiday name")
    date: date_type = Field(..., description="Holiday date")
    type: HolidayType = Field(HolidayType.LOCAL, description="national or local")

    model_config = ConfigDict(frozen=True)


class HolidayCreate(BaseModel):
    """Schema for adding a local holiday to the in-memory calendar"""
    id: Optional[str] = Field(None, description="Optional id; generated when omitted")
    name: str = Field(..., min_length=1, description="Holiday name")
    date: date_type = Field(..., description="Holiday date")


class NationalHoliday(BaseModel):
    """Brazilian national holiday computed for a year"""
    name: str
    date: date_type
    is_national: bool = True

    model_config = ConfigDict(frozen=True)


class NationalHolidayCheck(BaseModel):
    is_holiday: bool
    name: Optional[str] = None


class HolidayHoursInMonth(BaseModel):
    """Hours lost to weekday national holidays in one month"""
    total_hours: int
    holidays: List[NationalHoliday]


class HolidayHoursInYear(BaseModel):
    """Hours lost to weekday national holidays across a year"""
    total_hours: int
    total_days: int
    holidays: List[NationalHoliday]

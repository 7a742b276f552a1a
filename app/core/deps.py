"""
Dependencies for FastAPI endpoints
"""
import logging
from typing import Optional
from fastapi import Query
from app.core.config import settings
from app.services.calendar_client import CalendarEventsClient
from app.services.holiday_cache import HolidayCache

logger = logging.getLogger(__name__)

_holiday_cache: Optional[HolidayCache] = None


def build_holiday_cache() -> HolidayCache:
    """Holiday cache backed by the calendar events service when one is configured"""
    if not settings.CALENDAR_API_BASE_URL:
        logger.info("CALENDAR_API_BASE_URL not set; only national holidays will be used")
        return HolidayCache(fetch=None)
    client = CalendarEventsClient()
    return HolidayCache(fetch=client.fetch_events)


def get_holiday_cache() -> HolidayCache:
    """Dependency for the process-wide holiday cache"""
    global _holiday_cache
    if _holiday_cache is None:
        _holiday_cache = build_holiday_cache()
    return _holiday_cache


def get_department_id(
    department_id: Optional[str] = Query(None, description="Department whose own events are included")
) -> Optional[str]:
    """Dependency for the optional department filter"""
    return department_id

"""
Client for the external calendar events service

The planning backend owns organizational calendar events (municipal
holidays, bridge days, recesses, optional days). This module only reads
them and maps them into Holiday entries for the calendar engine.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional
import httpx
from pydantic import ValidationError
from app.core.config import settings
from app.core.errors import CalendarServiceError
from app.schemas.calendar_event import CalendarEvent, CalendarEventListResponse, YearCalendarSummary
from app.schemas.holiday import Holiday
from app.utils.enums import CalendarEventType, HolidayType

logger = logging.getLogger(__name__)


def events_to_holidays(events: Iterable[CalendarEvent]) -> List[Holiday]:
    """
    Map calendar events to local holidays.

    All four event types collapse into HolidayType.LOCAL; the capacity
    engine only distinguishes national from local.
    """
    return [
        Holiday(id=event.id, name=event.name, date=event.date, type=HolidayType.LOCAL)
        for event in events
    ]


def summarize_events(year: int, events: Iterable[CalendarEvent]) -> YearCalendarSummary:
    """Per-type counts and total hours lost, as the backend's year summary reports them"""
    events = sorted((e for e in events if e.date.year == year), key=lambda e: e.date)
    counts = {event_type: 0 for event_type in CalendarEventType}
    for event in events:
        counts[event.type] += 1
    return YearCalendarSummary(
        year=year,
        total_holidays=counts[CalendarEventType.HOLIDAY],
        total_bridge_days=counts[CalendarEventType.BRIDGE_DAY],
        total_recess_days=counts[CalendarEventType.RECESS],
        total_optional_days=counts[CalendarEventType.OPTIONAL_DAY],
        total_hours_lost=sum(e.hours_lost for e in events),
        events=events,
    )


class CalendarEventsClient:
    """
    Read-only async client for GET /api/calendar.

    Args:
        base_url: Service base URL (defaults to settings.CALENDAR_API_BASE_URL)
        token: Optional bearer token
        timeout: Seconds before a request is abandoned
        transport: Optional httpx transport, used by tests
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.CALENDAR_API_BASE_URL or "").rstrip("/")
        self.token = token if token is not None else settings.CALENDAR_API_TOKEN
        self.timeout = timeout if timeout is not None else settings.CALENDAR_API_TIMEOUT_SECS
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        if not self.base_url:
            raise CalendarServiceError("CALENDAR_API_BASE_URL is not configured")

        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise CalendarServiceError(
                    f"Calendar service answered {e.response.status_code} for {path}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                raise CalendarServiceError(f"Calendar service unreachable: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise CalendarServiceError(f"Calendar service returned invalid JSON for {path}") from e

    async def fetch_events(self, year: int, department_id: Optional[str] = None) -> List[CalendarEvent]:
        """
        Calendar events of a year (company-wide plus the department's own)

        Raises:
            CalendarServiceError: On transport, HTTP or payload errors
        """
        params: Dict[str, Any] = {"year": year}
        if department_id:
            params["departmentId"] = department_id

        payload = await self._get("/api/calendar", params=params)
        try:
            events = CalendarEventListResponse.model_validate(payload).events
        except ValidationError as e:
            raise CalendarServiceError(f"Unexpected calendar events payload: {e}") from e

        logger.debug("Fetched %d calendar events for %s (department=%s)", len(events), year, department_id)
        return events

    async def fetch_year_summary(self, year: int, department_id: Optional[str] = None) -> YearCalendarSummary:
        """
        Backend-computed year summary

        Raises:
            CalendarServiceError: On transport, HTTP or payload errors
        """
        params = {"departmentId": department_id} if department_id else None
        payload = await self._get(f"/api/calendar/year/{year}", params=params)
        try:
            return YearCalendarSummary.model_validate(payload)
        except ValidationError as e:
            raise CalendarServiceError(f"Unexpected year summary payload: {e}") from e

"""
Per-year cache of custom holidays

Custom holidays come from the calendar events service. The cache is keyed
by (year, department_id) and takes the fetch function as a constructor
argument so tests can plug in fixtures instead of a network client.

Concurrent first loads of a key share a single fetch. A refresh takes a
sequence number and its response is stored only if no newer refresh for
the same key started after it; the caller of a superseded refresh waits
for the newer fetch instead of reading a half-loaded entry. Fetches are
never cancelled. The active-year view reads only its own key, so a late
answer for a previously selected year cannot replace the current one.
"""
import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Awaitable, Callable, Dict, List, Optional, Tuple
from app.core.errors import CalendarServiceError
from app.schemas.calendar_event import CalendarEvent
from app.schemas.holiday import Holiday
from app.services.calendar_client import events_to_holidays
from app.utils.enums import HolidayType

logger = logging.getLogger(__name__)

EventFetcher = Callable[[int, Optional[str]], Awaitable[List[CalendarEvent]]]
CacheKey = Tuple[int, Optional[str]]


@dataclass
class _CacheEntry:
    events: List[CalendarEvent] = field(default_factory=list)
    holidays: List[Holiday] = field(default_factory=list)


class HolidayCache:
    """
    Custom holiday lists per (year, department).

    Args:
        fetch: async callable (year, department_id) -> list of CalendarEvent.
            When None, every year resolves to no custom holidays.
    """

    def __init__(self, fetch: Optional[EventFetcher] = None):
        self._fetch = fetch
        self._entries: Dict[CacheKey, _CacheEntry] = {}
        self._latest_request: Dict[CacheKey, int] = {}
        self._in_flight: Dict[CacheKey, "asyncio.Task[None]"] = {}
        self._sequence = itertools.count(1)
        self._local_ids = itertools.count(1)
        self._active_key: Optional[CacheKey] = None

    @staticmethod
    def _key(year: int, department_id: Optional[str] = None) -> CacheKey:
        return (year, department_id or None)

    def is_cached(self, year: int, department_id: Optional[str] = None) -> bool:
        return self._key(year, department_id) in self._entries

    async def _load(self, year: int, department_id: Optional[str]) -> List[CalendarEvent]:
        if self._fetch is None:
            return []
        try:
            return list(await self._fetch(year, department_id))
        except CalendarServiceError as e:
            logger.warning(
                "Could not load calendar events for %s (department=%s): %s; using national holidays only",
                year, department_id, e,
            )
        except Exception:
            logger.exception(
                "Unexpected error loading calendar events for %s (department=%s); using national holidays only",
                year, department_id,
            )
        return []

    async def _load_and_store(self, key: CacheKey, request_id: int) -> None:
        events = await self._load(*key)
        if self._latest_request.get(key) != request_id:
            logger.debug("Discarding stale calendar response #%d for %s", request_id, key)
            return
        self._entries[key] = _CacheEntry(events=events, holidays=events_to_holidays(events))

    def _forget_in_flight(self, key: CacheKey, task: "asyncio.Task[None]") -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]

    async def _settle(self, key: CacheKey) -> None:
        """Wait until no fetch for the key is running, following newer refreshes"""
        task = self._in_flight.get(key)
        while task is not None and not task.done():
            await asyncio.shield(task)
            task = self._in_flight.get(key)

    async def refresh(self, year: int, department_id: Optional[str] = None) -> List[Holiday]:
        """
        Fetch the year's events again and replace the cached entry.

        Local edits made through add_holiday/remove_holiday are dropped.
        A failed fetch stores an empty list. When a newer refresh of the
        same key starts meanwhile, its result is the one returned.

        Returns:
            The custom holidays now cached for the key
        """
        key = self._key(year, department_id)
        request_id = next(self._sequence)
        self._latest_request[key] = request_id

        task = asyncio.ensure_future(self._load_and_store(key, request_id))
        self._in_flight[key] = task
        task.add_done_callback(lambda t: self._forget_in_flight(key, t))

        await self._settle(key)
        return self._holidays_for(key)

    async def _ensure_loaded(self, key: CacheKey) -> None:
        if key in self._entries:
            return
        if key in self._in_flight:
            await self._settle(key)
        if key not in self._entries:
            await self.refresh(*key)

    async def get_holidays(self, year: int, department_id: Optional[str] = None) -> List[Holiday]:
        """Cached custom holidays, fetching them on first use"""
        key = self._key(year, department_id)
        await self._ensure_loaded(key)
        return self._holidays_for(key)

    async def get_events(self, year: int, department_id: Optional[str] = None) -> List[CalendarEvent]:
        """Raw calendar events behind the cached holidays"""
        key = self._key(year, department_id)
        await self._ensure_loaded(key)
        entry = self._entries.get(key)
        return list(entry.events) if entry else []

    def _holidays_for(self, key: CacheKey) -> List[Holiday]:
        entry = self._entries.get(key)
        return list(entry.holidays) if entry else []

    async def select_year(self, year: int, department_id: Optional[str] = None) -> List[Holiday]:
        """Make a year the active one and load its holidays"""
        self._active_key = self._key(year, department_id)
        return await self.get_holidays(year, department_id)

    @property
    def active_year(self) -> Optional[int]:
        return self._active_key[0] if self._active_key else None

    @property
    def active_holidays(self) -> List[Holiday]:
        """Custom holidays of the active year (empty until one is selected and loaded)"""
        if self._active_key is None:
            return []
        return self._holidays_for(self._active_key)

    async def add_holiday(
        self,
        year: int,
        name: str,
        holiday_date: date,
        holiday_id: Optional[str] = None,
        department_id: Optional[str] = None
    ) -> Holiday:
        """
        Add a local holiday to a year; it lasts until the next refresh.

        The year is loaded first, and any fetch already running for it is
        awaited, so the new holiday neither hides the service's events nor
        gets overwritten by that fetch.
        """
        key = self._key(year, department_id)
        await self._settle(key)
        await self._ensure_loaded(key)
        holiday = Holiday(
            id=holiday_id or f"hol-{next(self._local_ids)}",
            name=name,
            date=holiday_date,
            type=HolidayType.LOCAL,
        )
        self._entries.setdefault(key, _CacheEntry()).holidays.append(holiday)
        return holiday

    def remove_holiday(self, year: int, holiday_id: str, department_id: Optional[str] = None) -> bool:
        """Remove a cached holiday by id. Returns False when nothing matched."""
        entry = self._entries.get(self._key(year, department_id))
        if entry is None:
            return False
        remaining = [h for h in entry.holidays if h.id != holiday_id]
        removed = len(remaining) != len(entry.holidays)
        entry.holidays = remaining
        return removed

    def invalidate(self, year: Optional[int] = None) -> None:
        """Forget one year (all departments) or everything"""
        if year is None:
            self._entries.clear()
            return
        for key in [k for k in self._entries if k[0] == year]:
            del self._entries[key]

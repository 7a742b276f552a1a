"""
Pytest configuration and fixtures
"""
from datetime import date
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.deps import get_holiday_cache
from app.core.errors import CalendarServiceError
from app.schemas.calendar_event import CalendarEvent
from app.schemas.employee import Employee, FixedAllocation, VacationPeriod
from app.services.holiday_cache import HolidayCache
from app.utils.enums import CalendarEventType

OBRAS_DEPARTMENT = "dept-obras"

# Calendar events the fake service publishes; year 2030 simulates an outage
CALENDAR_EVENTS = {
    2024: [
        CalendarEvent(
            id="evt-carnaval-2024",
            name="Segunda de Carnaval",
            date=date(2024, 2, 12),
            type=CalendarEventType.OPTIONAL_DAY,
            hours_lost=8,
        ),
        CalendarEvent(
            id="evt-recesso-24",
            name="Recesso de Natal",
            date=date(2024, 12, 24),
            type=CalendarEventType.RECESS,
            hours_lost=8,
        ),
        CalendarEvent(
            id="evt-recesso-31",
            name="Recesso de Ano Novo",
            date=date(2024, 12, 31),
            type=CalendarEventType.RECESS,
            hours_lost=8,
        ),
        CalendarEvent(
            id="evt-municipal",
            name="Aniversário da Cidade",
            date=date(2024, 8, 15),
            type=CalendarEventType.HOLIDAY,
            hours_lost=8,
            is_company_wide=False,
            department_id=OBRAS_DEPARTMENT,
        ),
    ],
}

OUTAGE_YEAR = 2030


async def fake_fetch_events(year: int, department_id: Optional[str] = None) -> List[CalendarEvent]:
    """Stand-in for CalendarEventsClient.fetch_events"""
    if year == OUTAGE_YEAR:
        raise CalendarServiceError("Calendar service unreachable: connection refused")
    return [
        event for event in CALENDAR_EVENTS.get(year, [])
        if event.is_company_wide or event.department_id == department_id
    ]


@pytest.fixture(scope="function")
def holiday_cache():
    """Holiday cache backed by the fake calendar service"""
    return HolidayCache(fetch=fake_fetch_events)


@pytest.fixture(scope="function")
def client(holiday_cache):
    """Test client fixture with the holiday cache overridden"""
    app.dependency_overrides[get_holiday_cache] = lambda: holiday_cache
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def analyst():
    """8h/day analyst with a 40h/month standing commitment and no vacations"""
    return Employee(
        id="emp-1",
        name="Marina Costa",
        role="Analista",
        team_id="team-contabil",
        daily_hours=8,
        fixed_allocations=[
            FixedAllocation(id="fa-1", name="Reuniões de acompanhamento", hours_per_month=40),
        ],
    )


@pytest.fixture
def vacationing_employee():
    """Employee on vacation July 1-15, 2024"""
    return Employee(
        id="emp-2",
        name="Rafael Souza",
        role="Consultor",
        team_id="team-financeiro",
        daily_hours=8,
        vacations=[
            VacationPeriod(id="vac-1", start_date=date(2024, 7, 1), end_date=date(2024, 7, 15)),
        ],
    )

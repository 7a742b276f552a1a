"""
Tests for calendar-day parsing helpers
"""
import pytest
from datetime import date, datetime
from app.schemas.calendar_event import CalendarEvent
from app.utils.datetime_utils import as_date, iter_days, month_bounds, parse_iso_date


@pytest.mark.parametrize("text", [
    "2024-08-15",
    "2024-08-15T00:00:00",
    "2024-08-15T00:00:00Z",
    "2024-08-15T00:00:00.000Z",
    "2024-08-15T00:00:00.0000000Z",
    "2024-08-15T00:00:00.0000000+00:00",
    "2024-08-15T23:30:00-03:00",
    "2024-08-15 00:00:00",
    " 2024-08-15T00:00:00Z ",
])
def test_parse_iso_date_keeps_calendar_day(text):
    assert parse_iso_date(text) == date(2024, 8, 15)


@pytest.mark.parametrize("text", ["", "15/08/2024", "2024-08-15X00:00", "2024-13-01", "amanhã"])
def test_parse_iso_date_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_iso_date(text)


def test_as_date_accepts_dates_and_datetimes():
    assert as_date(date(2024, 8, 15)) == date(2024, 8, 15)
    assert as_date(datetime(2024, 8, 15, 21, 0)) == date(2024, 8, 15)


def test_as_date_rejects_other_types():
    with pytest.raises(ValueError):
        as_date(20240815)


def test_event_with_seven_fractional_digits():
    evt = CalendarEvent.model_validate({
        "id": "evt-9",
        "name": "Aniversário da Cidade",
        "date": "2024-08-15T00:00:00.0000000Z",
        "type": "Holiday",
    })
    assert evt.date == date(2024, 8, 15)


def test_month_bounds_and_iter_days():
    start, end = month_bounds(2024, 2)
    assert (start, end) == (date(2024, 2, 1), date(2024, 2, 29))
    assert len(list(iter_days(start, end))) == 29

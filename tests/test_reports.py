"""Tests for report filtering by month, venue and search text."""

from datetime import date, time

import pytest
from pydantic import ValidationError

from trainings.domain.models import ReportQuery, Session, Venue
from trainings.services.reports import apply_query, filter_sessions


def _make_session(session_id: str, venue: Venue, day: date, title: str = "Drill") -> Session:
    return Session(
        id=session_id,
        owner_id="coach-1",
        title=title,
        venue=venue,
        date=day,
        start_time=time(9),
        end_time=time(10),
    )


@pytest.fixture()
def sessions() -> list[Session]:
    return [
        _make_session("1", Venue.POOL, date(2026, 6, 2), "Morning Laps"),
        _make_session("2", Venue.GROUND, date(2026, 6, 15), "Sprint Drill"),
        _make_session("3", Venue.POOL, date(2026, 7, 1), "Water Polo"),
        _make_session("4", Venue.POOL, date(2025, 6, 20), "Old Laps"),
    ]


def test_no_filters_returns_input_unchanged(sessions):
    assert filter_sessions(sessions) is sessions
    assert apply_query(sessions, ReportQuery()) is sessions


def test_month_filter(sessions):
    june = filter_sessions(sessions, month=6)
    assert [s.id for s in june] == ["1", "2", "4"]


def test_month_and_year_filter(sessions):
    june_2026 = filter_sessions(sessions, month=6, year=2026)
    assert [s.id for s in june_2026] == ["1", "2"]


def test_venue_filter(sessions):
    assert [s.id for s in filter_sessions(sessions, venue=Venue.POOL)] == ["1", "3", "4"]


def test_month_and_venue_combined(sessions):
    assert [s.id for s in filter_sessions(sessions, month=6, venue=Venue.POOL)] == ["1", "4"]


def test_search_matches_title_or_venue(sessions):
    assert [s.id for s in filter_sessions(sessions, search="laps")] == ["1", "4"]
    assert [s.id for s in filter_sessions(sessions, search="GROUND")] == ["2"]


def test_query_rejects_bad_month():
    with pytest.raises(ValidationError):
        ReportQuery(month=13)

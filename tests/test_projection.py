"""Tests for projecting sessions into calendar events."""

from datetime import date, datetime, time

from trainings.domain.models import Session, Venue
from trainings.services.projection import project


def _make_session(session_id: str, title: str, venue: Venue, day: date, start: time, end: time):
    return Session(
        id=session_id,
        owner_id="coach-1",
        title=title,
        venue=venue,
        date=day,
        start_time=start,
        end_time=end,
    )


def test_projection_is_one_to_one_and_ordered():
    sessions = [
        _make_session("b", "Laps", Venue.POOL, date(2026, 6, 3), time(6), time(7)),
        _make_session("a", "Sprints", Venue.GROUND, date(2026, 6, 2), time(16), time(17, 30)),
    ]

    events = project(sessions)

    assert len(events) == len(sessions)
    assert [e.id for e in events] == ["b", "a"]
    for event, session in zip(events, sessions):
        assert event.title == session.title
        assert event.venue == session.venue


def test_projection_combines_date_and_times():
    session = _make_session("x", "Drill", Venue.INDOOR_COURT, date(2026, 6, 2), time(23), time(23, 59))
    (event,) = project([session])
    assert event.start == datetime(2026, 6, 2, 23, 0)
    assert event.end == datetime(2026, 6, 2, 23, 59)


def test_projection_of_nothing():
    assert project([]) == []

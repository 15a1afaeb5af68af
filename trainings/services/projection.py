"""Project stored sessions into display-ready calendar events."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from trainings.domain.models import CalendarEvent, Session


def project(sessions: Iterable[Session]) -> list[CalendarEvent]:
    """Map each session to one calendar event, preserving input order.

    Start and end are local (naive) datetimes combining the session date
    with its start and end times.
    """
    return [
        CalendarEvent(
            id=session.id,
            title=session.title,
            venue=session.venue,
            start=datetime.combine(session.date, session.start_time),
            end=datetime.combine(session.date, session.end_time),
        )
        for session in sessions
    ]

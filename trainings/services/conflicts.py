"""Service for detecting venue double-bookings between sessions."""

from __future__ import annotations

from typing import Iterable

from trainings.domain.errors import Conflict
from trainings.domain.models import Session, SessionInput
from trainings.services.intervals import TimeInterval


def find_conflicts(
    candidate: SessionInput,
    existing_sessions: Iterable[Session],
    exclude_id: str | None = None,
) -> list[Session]:
    """Return existing sessions that clash with the candidate booking.

    Only sessions at the same venue on the same date are compared, and the
    session identified by ``exclude_id`` (the one being edited) is skipped.
    Overlap rule: conflict if new.start < existing.end AND existing.start < new.end.
    Exact boundary touches (end == start) are NOT considered conflicts.
    """
    interval = TimeInterval(candidate.start_time, candidate.end_time)
    return [
        session
        for session in existing_sessions
        if session.id != exclude_id
        and session.venue == candidate.venue
        and session.date == candidate.date
        and interval.overlaps(TimeInterval(session.start_time, session.end_time))
    ]


def check_conflicts(
    candidate: SessionInput,
    existing_sessions: Iterable[Session],
    exclude_id: str | None = None,
) -> None:
    """Raise ``Conflict`` for the first clashing session, in iteration order."""
    conflicts = find_conflicts(candidate, existing_sessions, exclude_id)
    if conflicts:
        raise Conflict(conflicts[0])

"""Month/venue filtering of sessions for reports and exports."""

from __future__ import annotations

from trainings.domain.models import ReportQuery, Session, Venue


def filter_sessions(
    sessions: list[Session],
    month: int | None = None,
    venue: Venue | None = None,
    year: int | None = None,
    search: str | None = None,
) -> list[Session]:
    """Keep sessions matching every filter that is given.

    ``month`` is a calendar month number (1-12); with ``year`` the year must
    match too. ``search`` is a case-insensitive substring of title or venue.
    With no filters the input list itself is returned.
    """
    if month is None and venue is None and year is None and not search:
        return sessions

    needle = search.lower() if search else None

    def _keep(session: Session) -> bool:
        if month is not None and session.date.month != month:
            return False
        if year is not None and session.date.year != year:
            return False
        if venue is not None and session.venue != venue:
            return False
        if needle and not (
            needle in session.title.lower() or needle in session.venue.lower()
        ):
            return False
        return True

    return [session for session in sessions if _keep(session)]


def apply_query(sessions: list[Session], query: ReportQuery) -> list[Session]:
    return filter_sessions(
        sessions,
        month=query.month,
        venue=query.venue,
        year=query.year,
        search=query.search,
    )

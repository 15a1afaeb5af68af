"""Dashboard summary of a coach's sessions."""

from __future__ import annotations

from datetime import date

from trainings.domain.models import AttendancePoint, CoachSummary, Session

TREND_LENGTH = 5


def _attendance_pct(session: Session) -> float:
    if session.capacity <= 0:
        return 0.0
    return len(session.participants) / session.capacity * 100


def summarize(sessions: list[Session], today: date) -> CoachSummary:
    """Counts, average fill rate, and the fill-rate trend of the latest sessions."""
    upcoming = sum(1 for s in sessions if s.date >= today)

    avg_attendance = 0
    if sessions:
        avg_attendance = round(sum(_attendance_pct(s) for s in sessions) / len(sessions))

    by_date = sorted(sessions, key=lambda s: (s.date, s.start_time))
    trend = [
        AttendancePoint(date=s.date, attendance=round(_attendance_pct(s)))
        for s in by_date[-TREND_LENGTH:]
    ]

    return CoachSummary(
        total=len(sessions),
        upcoming=upcoming,
        completed=len(sessions) - upcoming,
        avg_attendance=avg_attendance,
        trend=trend,
    )

"""Demo sessions for local runs, booked through the scheduling service."""

from __future__ import annotations

from datetime import time, timedelta

from trainings.domain.models import Session, SessionInput, Venue
from trainings.services.scheduling import SchedulingService


def seed_demo_sessions(scheduler: SchedulingService) -> list[Session]:
    """Book a handful of non-conflicting sessions starting tomorrow."""
    base = scheduler.booking_window().min_date + timedelta(days=1)
    demo = [
        ("demo-coach", "Morning Drill", Venue.POOL, base, time(6, 0), time(7, 0)),
        ("demo-coach", "Sprint Session", Venue.GROUND, base, time(16, 0), time(17, 30)),
        ("demo-coach", "Netball Skills", Venue.NETBALL_COURT, base, time(17, 0), time(18, 0)),
        (
            "demo-coach-2",
            "Doubles Practice",
            Venue.TENNIS_COURT,
            base + timedelta(days=2),
            time(9, 0),
            time(10, 30),
        ),
    ]
    return [
        scheduler.create_session(
            owner_id,
            SessionInput(
                title=title, venue=venue, date=day, start_time=start, end_time=end
            ),
        )
        for owner_id, title, venue, day, start, end in demo
    ]

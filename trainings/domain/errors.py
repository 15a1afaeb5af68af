"""Rejection reasons raised by the scheduling service.

Every error carries enough structured detail for a client to render an
actionable message (which session conflicts, which window bound was hit).
"""

from __future__ import annotations

from datetime import date, time

from trainings.domain.models import Session


class SchedulingError(Exception):
    """Base class for all scheduling rejections."""

    code = "scheduling_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class InvalidInterval(SchedulingError):
    code = "invalid_interval"

    def __init__(self, start: time, end: time) -> None:
        super().__init__(
            f"End time {end:%H:%M} must be after start time {start:%H:%M}"
        )
        self.start = start
        self.end = end

    def to_detail(self) -> dict:
        return {
            **super().to_detail(),
            "start_time": self.start.isoformat(timespec="minutes"),
            "end_time": self.end.isoformat(timespec="minutes"),
        }


class PastDate(SchedulingError):
    code = "past_date"

    def __init__(self, requested: date, min_date: date) -> None:
        super().__init__(
            f"Cannot schedule a session on {requested.isoformat()}; "
            f"the earliest bookable date is {min_date.isoformat()}"
        )
        self.requested = requested
        self.min_date = min_date

    def to_detail(self) -> dict:
        return {
            **super().to_detail(),
            "date": self.requested.isoformat(),
            "min_date": self.min_date.isoformat(),
        }


class BeyondHorizon(SchedulingError):
    code = "beyond_horizon"

    def __init__(self, requested: date, max_date: date) -> None:
        super().__init__(
            f"Cannot schedule a session on {requested.isoformat()}; "
            f"sessions can only be booked up to {max_date.isoformat()}"
        )
        self.requested = requested
        self.max_date = max_date

    def to_detail(self) -> dict:
        return {
            **super().to_detail(),
            "date": self.requested.isoformat(),
            "max_date": self.max_date.isoformat(),
        }


class Conflict(SchedulingError):
    code = "conflict"

    def __init__(self, conflicting: Session) -> None:
        super().__init__(
            f"Conflicts with {conflicting.title!r} at {conflicting.venue}, "
            f"{conflicting.start_time:%H:%M}-{conflicting.end_time:%H:%M} "
            f"on {conflicting.date.isoformat()}"
        )
        self.conflicting = conflicting

    def to_detail(self) -> dict:
        return {
            **super().to_detail(),
            "conflicting_session": {
                "id": self.conflicting.id,
                "title": self.conflicting.title,
                "venue": str(self.conflicting.venue),
                "date": self.conflicting.date.isoformat(),
                "start_time": self.conflicting.start_time.isoformat(
                    timespec="minutes"
                ),
                "end_time": self.conflicting.end_time.isoformat(timespec="minutes"),
            },
        }


class NotFound(SchedulingError):
    code = "not_found"

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id

    def to_detail(self) -> dict:
        return {**super().to_detail(), "session_id": self.session_id}


class StoreUnavailable(SchedulingError):
    """The session store could not complete the call. Safe to retry."""

    code = "store_unavailable"

    def __init__(self, message: str = "Session store is unavailable") -> None:
        super().__init__(message)


class AlreadyRegistered(SchedulingError):
    code = "already_registered"

    def __init__(self, session_id: str, member_id: str) -> None:
        super().__init__(f"Member {member_id} is already registered")
        self.session_id = session_id
        self.member_id = member_id


class SessionFull(SchedulingError):
    code = "session_full"

    def __init__(self, session_id: str, capacity: int) -> None:
        super().__init__(f"Session is full ({capacity} participants)")
        self.session_id = session_id
        self.capacity = capacity

    def to_detail(self) -> dict:
        return {**super().to_detail(), "capacity": self.capacity}


class CapacityTooLow(SchedulingError):
    code = "capacity_too_low"

    def __init__(self, capacity: int, registered: int) -> None:
        super().__init__(
            f"Capacity {capacity} is below the {registered} members already registered"
        )
        self.capacity = capacity
        self.registered = registered

    def to_detail(self) -> dict:
        return {
            **super().to_detail(),
            "capacity": self.capacity,
            "registered": self.registered,
        }

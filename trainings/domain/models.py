"""Domain models for the training-session scheduler."""

from __future__ import annotations

import datetime as dt
import uuid
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class Venue(StrEnum):
    GROUND = "Ground"
    POOL = "Pool"
    NETBALL_COURT = "Netball Court"
    INDOOR_COURT = "Indoor Court"
    TENNIS_COURT = "Tennis Court"


class CallerRole(StrEnum):
    COACH = "coach"
    ADMIN = "admin"


class TimelineEntryType(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    PARTICIPANT_REGISTERED = "participant_registered"
    PARTICIPANT_UNREGISTERED = "participant_unregistered"


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Session(BaseModel):
    """A booked training session: one venue, one date, one time interval."""

    id: str
    owner_id: str
    title: str
    venue: Venue
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    capacity: int = Field(default=20, ge=1, le=500)
    participants: list[str] = Field(default_factory=list)
    created_at: dt.datetime = Field(default_factory=_utcnow)
    updated_at: dt.datetime | None = None


class TimelineEntry(BaseModel):
    id: str = Field(default_factory=_new_id)
    session_id: str
    timestamp: dt.datetime = Field(default_factory=_utcnow)
    type: TimelineEntryType
    payload: dict = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class SessionInput(BaseModel):
    """Mutable fields of a session, as submitted on create and update.

    Interval ordering is not validated here; the scheduling service
    rejects it with ``InvalidInterval`` before anything is stored.
    """

    title: str = Field(min_length=1)
    venue: Venue
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    capacity: int | None = Field(default=None, ge=1, le=500)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


class CalendarEvent(BaseModel):
    id: str
    title: str
    venue: Venue
    start: dt.datetime
    end: dt.datetime


class ReportQuery(BaseModel):
    month: int | None = Field(default=None, ge=1, le=12)
    year: int | None = None
    venue: Venue | None = None
    search: str | None = None


class AttendancePoint(BaseModel):
    date: dt.date
    attendance: int


class CoachSummary(BaseModel):
    total: int
    upcoming: int
    completed: int
    avg_attendance: int
    trend: list[AttendancePoint] = Field(default_factory=list)


class BookingWindow(BaseModel):
    role: CallerRole
    min_date: dt.date
    max_date: dt.date

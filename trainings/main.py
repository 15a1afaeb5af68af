"""FastAPI application — entry point for the training-session scheduler."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import FastAPI, Header, Query, Request
from fastapi.responses import JSONResponse

from trainings.config import get_settings
from trainings.domain.bus import EventBus
from trainings.domain.errors import (
    Conflict,
    NotFound,
    SchedulingError,
    StoreUnavailable,
)
from trainings.domain.handlers import HandlerRegistry
from trainings.domain.models import (
    BookingWindow,
    CalendarEvent,
    CallerRole,
    CoachSummary,
    ReportQuery,
    Session,
    SessionInput,
    TimelineEntry,
)
from trainings.logging_config import setup_logging
from trainings.repos.memory import InMemorySessionStore, TimelineRepository
from trainings.services.projection import project
from trainings.services.reports import apply_query
from trainings.services.scheduling import SchedulingService
from trainings.services.seed import seed_demo_sessions
from trainings.services.window import policies_from_settings

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Training Session Scheduler")

# ── Singletons (created at import time for simplicity) ────────────────
event_bus = EventBus()
session_store = InMemorySessionStore(default_capacity=settings.DEFAULT_CAPACITY)
timeline_repo = TimelineRepository()

handler_registry = HandlerRegistry(bus=event_bus, timeline_repo=timeline_repo)

scheduler = SchedulingService(
    store=session_store,
    policies=policies_from_settings(settings),
    bus=event_bus,
)

if settings.SEED_DEMO_DATA:
    seeded = seed_demo_sessions(scheduler)
    logger.info("Seeded %d demo sessions", len(seeded))

MemberId = Annotated[str, Header(alias="X-Member-Id", min_length=1)]
Role = Annotated[CallerRole, Header(alias="X-Role")]


# ── Error mapping ─────────────────────────────────────────────────────


def _status_for(exc: SchedulingError) -> int:
    if isinstance(exc, NotFound):
        return 404
    if isinstance(exc, Conflict):
        return 409
    if isinstance(exc, StoreUnavailable):
        return 503
    return 400


@app.exception_handler(SchedulingError)
async def scheduling_error_handler(request: Request, exc: SchedulingError) -> JSONResponse:
    headers = None
    if isinstance(exc, StoreUnavailable):
        headers = {"Retry-After": str(settings.STORE_RETRY_AFTER_S)}
    return JSONResponse(
        status_code=_status_for(exc),
        content={"detail": exc.to_detail()},
        headers=headers,
    )


# ── Routes ────────────────────────────────────────────────────────────


@app.post("/sessions", response_model=Session, status_code=201)
def create_session(
    payload: SessionInput, member_id: MemberId, role: Role = CallerRole.COACH
) -> Session:
    """Book a venue for a training session."""
    return scheduler.create_session(member_id, payload, role=role)


@app.get("/sessions", response_model=list[Session])
def list_sessions() -> list[Session]:
    """Return all sessions, unfiltered."""
    return scheduler.list_all()


@app.get("/sessions/mine", response_model=list[Session])
def list_my_sessions(member_id: MemberId) -> list[Session]:
    """Return the caller's sessions, most recently created first."""
    return scheduler.list_sessions_for_owner(member_id)


@app.get("/sessions/{session_id}", response_model=Session)
def get_session(session_id: str) -> Session:
    return scheduler.get_session(session_id)


@app.put("/sessions/{session_id}", response_model=Session)
def update_session(
    session_id: str,
    payload: SessionInput,
    member_id: MemberId,
    role: Role = CallerRole.COACH,
) -> Session:
    """Replace a session's details. Coaches may only edit their own sessions."""
    owner = None if role == CallerRole.ADMIN else member_id
    return scheduler.update_session(session_id, payload, owner_id=owner, role=role)


@app.delete("/sessions/{session_id}")
def delete_session(
    session_id: str, member_id: MemberId, role: Role = CallerRole.COACH
) -> dict:
    owner = None if role == CallerRole.ADMIN else member_id
    scheduler.delete_session(session_id, owner_id=owner)
    return {"message": "Session removed"}


@app.post("/sessions/{session_id}/register", response_model=Session)
def register_for_session(session_id: str, member_id: MemberId) -> Session:
    return scheduler.register_participant(session_id, member_id)


@app.post("/sessions/{session_id}/unregister", response_model=Session)
def unregister_from_session(session_id: str, member_id: MemberId) -> Session:
    return scheduler.unregister_participant(session_id, member_id)


@app.get("/sessions/{session_id}/timeline", response_model=list[TimelineEntry])
def get_session_timeline(session_id: str) -> list[TimelineEntry]:
    """Return the activity timeline of a session, including after deletion."""
    entries = timeline_repo.list_for_session(session_id)
    if not entries:
        scheduler.get_session(session_id)
    return entries


@app.get("/calendar", response_model=list[CalendarEvent])
def get_calendar(owner: str | None = None) -> list[CalendarEvent]:
    """Calendar events for every session, or for one owner's sessions."""
    sessions = (
        scheduler.list_sessions_for_owner(owner) if owner else scheduler.list_all()
    )
    return project(sessions)


@app.get("/reports/sessions", response_model=list[Session])
def report_sessions(query: Annotated[ReportQuery, Query()]) -> list[Session]:
    """Sessions filtered by month, year, venue and free-text search."""
    return apply_query(scheduler.list_all(), query)


@app.get("/coach/summary", response_model=CoachSummary)
def coach_summary(member_id: MemberId) -> CoachSummary:
    return scheduler.summary_for_owner(member_id)


@app.get("/booking-window", response_model=BookingWindow)
def booking_window(role: Role = CallerRole.COACH) -> BookingWindow:
    """Earliest and latest bookable dates for the caller's role."""
    return scheduler.booking_window(role)

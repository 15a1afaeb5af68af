"""Scheduling service: the single entry point for mutating sessions.

Every write follows the same pipeline. The time interval is built (which
rejects ``end <= start``), the date is checked against the caller's booking
window, the candidate is checked against all other sessions at that venue and
date, and only then is the store called. No store write happens for a
rejected request.

Check-then-write runs under one lock, so this service is the single writer
for its store. Running several service processes against a shared remote
store needs the store itself to enforce venue exclusivity.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import Callable, Iterator

from trainings.domain.bus import EventBus
from trainings.domain.errors import (
    AlreadyRegistered,
    CapacityTooLow,
    NotFound,
    SchedulingError,
    SessionFull,
    StoreUnavailable,
)
from trainings.domain.events import (
    ParticipantRegistered,
    ParticipantUnregistered,
    SessionCreated,
    SessionDeleted,
    SessionUpdated,
)
from trainings.domain.models import (
    BookingWindow,
    CallerRole,
    CoachSummary,
    Session,
    SessionInput,
)
from trainings.repos.base import SessionStore
from trainings.services.conflicts import check_conflicts
from trainings.services.intervals import TimeInterval
from trainings.services.summary import summarize
from trainings.services.window import BookingWindowPolicy, default_policies

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = ("title", "venue", "date", "start_time", "end_time", "capacity")


class SchedulingService:
    def __init__(
        self,
        store: SessionStore,
        policies: dict[CallerRole, BookingWindowPolicy] | None = None,
        today: Callable[[], date] = date.today,
        bus: EventBus | None = None,
    ) -> None:
        if policies is None:
            policies = default_policies()
        missing = [role.value for role in CallerRole if role not in policies]
        if missing:
            raise ValueError(f"No booking window policy for role(s): {', '.join(missing)}")
        self.store = store
        self.policies = policies
        self.bus = bus or EventBus()
        self._today = today
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_session(
        self,
        owner_id: str,
        data: SessionInput,
        role: CallerRole = CallerRole.COACH,
    ) -> Session:
        """Validate and persist a new session for ``owner_id``."""
        try:
            self._validate_slot(data, role)
            with self._lock:
                existing = self._call_store(self.store.find_all)
                check_conflicts(data, existing)
                session = self._call_store(self.store.insert, owner_id, data)
        except SchedulingError as exc:
            self._log_rejection("create", exc, owner=owner_id)
            raise

        logger.info(
            "Booked %s %s %s-%s for %s (session %s)",
            session.venue,
            session.date,
            session.start_time,
            session.end_time,
            owner_id,
            session.id,
        )
        self.bus.publish(SessionCreated(session_id=session.id, owner_id=owner_id))
        return session

    def update_session(
        self,
        session_id: str,
        data: SessionInput,
        owner_id: str | None = None,
        role: CallerRole = CallerRole.COACH,
    ) -> Session:
        """Replace a session's mutable fields, revalidating as if newly created.

        When ``owner_id`` is given, sessions owned by someone else are
        reported as ``NotFound``.
        """
        try:
            self._validate_slot(data, role)
            with self._lock:
                current = self._get_owned(session_id, owner_id)
                if data.capacity is not None and data.capacity < len(current.participants):
                    raise CapacityTooLow(data.capacity, len(current.participants))
                existing = self._call_store(self.store.find_all)
                check_conflicts(data, existing, exclude_id=session_id)
                updated = self._call_store(self.store.replace, session_id, data)
        except SchedulingError as exc:
            self._log_rejection("update", exc, session=session_id)
            raise

        changed = [f for f in _MUTABLE_FIELDS if getattr(current, f) != getattr(updated, f)]
        logger.info("Updated session %s (%s)", session_id, ", ".join(changed) or "no changes")
        self.bus.publish(SessionUpdated(session_id=session_id, changed_fields=changed))
        return updated

    def delete_session(self, session_id: str, owner_id: str | None = None) -> None:
        """Remove a session. No window or conflict checks apply to deletion."""
        try:
            with self._lock:
                current = self._get_owned(session_id, owner_id)
                self._call_store(self.store.delete, session_id)
        except SchedulingError as exc:
            self._log_rejection("delete", exc, session=session_id)
            raise

        logger.info("Deleted session %s", session_id)
        self.bus.publish(SessionDeleted(session_id=session_id, title=current.title))

    def register_participant(self, session_id: str, member_id: str) -> Session:
        try:
            with self._lock:
                current = self._get_owned(session_id, None)
                if member_id in current.participants:
                    raise AlreadyRegistered(session_id, member_id)
                if len(current.participants) >= current.capacity:
                    raise SessionFull(session_id, current.capacity)
                updated = self._call_store(
                    self.store.set_participants,
                    session_id,
                    [*current.participants, member_id],
                )
        except SchedulingError as exc:
            self._log_rejection("register", exc, session=session_id, member=member_id)
            raise

        logger.info(
            "Registered %s for session %s (%d/%d)",
            member_id,
            session_id,
            len(updated.participants),
            updated.capacity,
        )
        self.bus.publish(ParticipantRegistered(session_id=session_id, member_id=member_id))
        return updated

    def unregister_participant(self, session_id: str, member_id: str) -> Session:
        """Remove a member from a session; a no-op if they were not registered."""
        try:
            with self._lock:
                current = self._get_owned(session_id, None)
                if member_id not in current.participants:
                    return current
                updated = self._call_store(
                    self.store.set_participants,
                    session_id,
                    [p for p in current.participants if p != member_id],
                )
        except SchedulingError as exc:
            self._log_rejection("unregister", exc, session=session_id, member=member_id)
            raise

        logger.info("Unregistered %s from session %s", member_id, session_id)
        self.bus.publish(ParticipantUnregistered(session_id=session_id, member_id=member_id))
        return updated

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_session(self, session_id: str) -> Session:
        return self._get_owned(session_id, None)

    def list_all(self) -> list[Session]:
        return self._call_store(self.store.find_all)

    def list_sessions_for_owner(self, owner_id: str) -> list[Session]:
        """Sessions created by ``owner_id``, newest first."""
        owned = [s for s in self.list_all() if s.owner_id == owner_id]
        return sorted(owned, key=lambda s: s.created_at, reverse=True)

    def summary_for_owner(self, owner_id: str) -> CoachSummary:
        owned = [s for s in self.list_all() if s.owner_id == owner_id]
        return summarize(owned, self._today())

    def booking_window(self, role: CallerRole = CallerRole.COACH) -> BookingWindow:
        min_date, max_date = self.policies[role].bounds(self._today())
        return BookingWindow(role=role, min_date=min_date, max_date=max_date)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate_slot(self, data: SessionInput, role: CallerRole) -> None:
        TimeInterval(data.start_time, data.end_time)
        self.policies[role].validate(data.date, self._today())

    def _get_owned(self, session_id: str, owner_id: str | None) -> Session:
        session = self._call_store(self.store.find_by_id, session_id)
        if session is None or (owner_id is not None and session.owner_id != owner_id):
            raise NotFound(session_id)
        return session

    def _call_store(self, method: Callable, *args):
        with _store_errors(method.__name__):
            return method(*args)

    @staticmethod
    def _log_rejection(operation: str, exc: SchedulingError, **context: str) -> None:
        if isinstance(exc, StoreUnavailable):
            return  # already logged at the store boundary
        extra = " ".join(f"{k}={v}" for k, v in context.items())
        logger.info("Rejected %s (%s): %s %s", operation, exc.code, exc.message, extra)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Translate transport failures from the store into ``StoreUnavailable``."""
    try:
        yield
    except StoreUnavailable:
        logger.warning("Session store unavailable during %s", operation)
        raise
    except (TimeoutError, ConnectionError) as exc:
        logger.warning("Session store failed during %s: %s", operation, exc)
        raise StoreUnavailable(f"Session store failed during {operation}") from exc

"""In-memory repositories for sessions and their activity timeline."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable

from trainings.domain.errors import NotFound
from trainings.domain.models import (
    Session,
    SessionInput,
    TimelineEntry,
)
from trainings.repos.base import SessionStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemorySessionStore(SessionStore):
    """Dict-backed store for Session instances, keyed by id.

    Dict insertion order is the store iteration order.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        default_capacity: int = 20,
    ) -> None:
        self._store: dict[str, Session] = {}
        self._clock = clock
        self._default_capacity = default_capacity

    def insert(self, owner_id: str, data: SessionInput) -> Session:
        fields = data.model_dump(exclude_none=True)
        fields.setdefault("capacity", self._default_capacity)
        session = Session(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            created_at=self._clock(),
            **fields,
        )
        self._store[session.id] = session
        return session

    def find_all(self) -> list[Session]:
        return list(self._store.values())

    def find_by_id(self, session_id: str) -> Session | None:
        return self._store.get(session_id)

    def replace(self, session_id: str, data: SessionInput) -> Session:
        current = self._store.get(session_id)
        if current is None:
            raise NotFound(session_id)
        updated = current.model_copy(
            update={**data.model_dump(exclude_none=True), "updated_at": self._clock()}
        )
        self._store[session_id] = updated
        return updated

    def delete(self, session_id: str) -> None:
        if self._store.pop(session_id, None) is None:
            raise NotFound(session_id)

    def set_participants(self, session_id: str, participants: list[str]) -> Session:
        current = self._store.get(session_id)
        if current is None:
            raise NotFound(session_id)
        updated = current.model_copy(update={"participants": list(participants)})
        self._store[session_id] = updated
        return updated


class TimelineRepository:
    """List-backed store for TimelineEntry instances."""

    def __init__(self) -> None:
        self._entries: list[TimelineEntry] = []

    def add(self, entry: TimelineEntry) -> None:
        self._entries.append(entry)

    def list_for_session(self, session_id: str) -> list[TimelineEntry]:
        return sorted(
            [e for e in self._entries if e.session_id == session_id],
            key=lambda e: e.timestamp,
        )

"""Session store interface (repository pattern).

The scheduling service is the only writer. Implementations backed by a
remote database must provide read-your-writes consistency, and should
enforce (venue, date, interval) exclusivity on their side as well when more
than one service process writes to them. They signal transient failures by
raising ``StoreUnavailable`` (``TimeoutError`` and ``ConnectionError`` are
translated by the service).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from trainings.domain.models import Session, SessionInput


class SessionStore(ABC):
    @abstractmethod
    def insert(self, owner_id: str, data: SessionInput) -> Session:
        """Persist a new session, assigning its id and created_at."""

    @abstractmethod
    def find_all(self) -> list[Session]:
        """Return every stored session in store iteration order."""

    @abstractmethod
    def find_by_id(self, session_id: str) -> Session | None: ...

    @abstractmethod
    def replace(self, session_id: str, data: SessionInput) -> Session:
        """Replace the mutable fields of a session; raise ``NotFound`` if absent."""

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Remove a session; raise ``NotFound`` if absent."""

    @abstractmethod
    def set_participants(self, session_id: str, participants: list[str]) -> Session:
        """Overwrite the participant list; raise ``NotFound`` if absent."""

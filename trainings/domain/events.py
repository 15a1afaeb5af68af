"""Domain events emitted after the session store has been written."""

from __future__ import annotations

from pydantic import BaseModel


class SessionCreated(BaseModel):
    """Fired when a new Session is persisted."""

    session_id: str
    owner_id: str


class SessionUpdated(BaseModel):
    """Fired when a Session's mutable fields have been replaced."""

    session_id: str
    changed_fields: list[str]


class SessionDeleted(BaseModel):
    session_id: str
    title: str


class ParticipantRegistered(BaseModel):
    session_id: str
    member_id: str


class ParticipantUnregistered(BaseModel):
    session_id: str
    member_id: str

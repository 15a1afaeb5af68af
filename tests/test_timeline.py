"""Tests for domain events and the per-session activity timeline."""

from __future__ import annotations

import logging
from datetime import date, time

import pytest

from trainings.domain.errors import Conflict
from trainings.domain.events import SessionCreated, SessionDeleted
from trainings.domain.models import SessionInput, TimelineEntryType, Venue


def _input(**overrides) -> SessionInput:
    defaults = dict(
        title="Netball Skills",
        venue=Venue.NETBALL_COURT,
        date=date(2026, 6, 3),
        start_time=time(17),
        end_time=time(18),
    )
    defaults.update(overrides)
    return SessionInput(**defaults)


def test_create_records_timeline_entry(env):
    session = env.service.create_session("coach-1", _input())

    entries = env.timeline_repo.list_for_session(session.id)
    assert [e.type for e in entries] == [TimelineEntryType.CREATED]
    assert entries[0].payload["owner_id"] == "coach-1"


def test_update_records_changed_fields(env):
    session = env.service.create_session("coach-1", _input())
    env.service.update_session(session.id, _input(title="Shooting", end_time=time(18, 30)))

    entries = env.timeline_repo.list_for_session(session.id)
    updated = [e for e in entries if e.type == TimelineEntryType.UPDATED]
    assert len(updated) == 1
    assert updated[0].payload["changed_fields"] == ["title", "end_time"]


def test_full_lifecycle_timeline(env):
    session = env.service.create_session("coach-1", _input())
    env.service.register_participant(session.id, "m1")
    env.service.unregister_participant(session.id, "m1")
    env.service.delete_session(session.id)

    types = [e.type for e in env.timeline_repo.list_for_session(session.id)]
    assert types == [
        TimelineEntryType.CREATED,
        TimelineEntryType.PARTICIPANT_REGISTERED,
        TimelineEntryType.PARTICIPANT_UNREGISTERED,
        TimelineEntryType.DELETED,
    ]


def test_rejected_booking_publishes_nothing(env):
    published = []
    env.bus.subscribe(SessionCreated, published.append)

    env.service.create_session("coach-1", _input())
    with pytest.raises(Conflict):
        env.service.create_session("coach-2", _input())

    assert len(published) == 1


def test_delete_event_carries_title(env):
    deleted = []
    env.bus.subscribe(SessionDeleted, deleted.append)

    session = env.service.create_session("coach-1", _input())
    env.service.delete_session(session.id)

    assert deleted[0].title == "Netball Skills"


def test_handlers_log_each_event(env, caplog):
    caplog.set_level(logging.DEBUG, logger="trainings.domain.handlers")

    session = env.service.create_session("coach-1", _input())
    env.service.update_session(session.id, _input(title="Shooting"))
    env.service.register_participant(session.id, "m1")
    env.service.unregister_participant(session.id, "m1")
    env.service.delete_session(session.id)

    messages = [
        r.getMessage() for r in caplog.records if r.name == "trainings.domain.handlers"
    ]
    assert messages == [
        f"Session {session.id} created by coach-1",
        f"Session {session.id} updated: ['title']",
        f"Member m1 joined session {session.id}",
        f"Member m1 left session {session.id}",
        f"Session {session.id} deleted",
    ]

"""Tests for the in-memory session store."""

from datetime import date, time

import pytest

from trainings.domain.errors import NotFound
from trainings.domain.models import SessionInput, Venue
from trainings.repos.memory import InMemorySessionStore


def _input(**overrides) -> SessionInput:
    defaults = dict(
        title="Doubles Practice",
        venue=Venue.TENNIS_COURT,
        date=date(2026, 6, 5),
        start_time=time(9),
        end_time=time(10, 30),
    )
    defaults.update(overrides)
    return SessionInput(**defaults)


def test_insert_uses_default_capacity():
    store = InMemorySessionStore(default_capacity=12)
    session = store.insert("coach-1", _input())
    assert session.capacity == 12
    assert store.find_all() == [session]


def test_replace_keeps_identity_fields():
    store = InMemorySessionStore()
    original = store.insert("coach-1", _input())
    store.set_participants(original.id, ["m1"])

    replaced = store.replace(original.id, _input(title="Singles", venue=Venue.GROUND))

    assert replaced.id == original.id
    assert replaced.owner_id == "coach-1"
    assert replaced.created_at == original.created_at
    assert replaced.participants == ["m1"]
    assert replaced.venue == Venue.GROUND


def test_missing_ids_raise_not_found():
    store = InMemorySessionStore()
    with pytest.raises(NotFound):
        store.replace("x", _input())
    with pytest.raises(NotFound):
        store.delete("x")
    with pytest.raises(NotFound):
        store.set_participants("x", [])
    assert store.find_by_id("x") is None

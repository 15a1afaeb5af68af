"""Shared fixtures: a fresh store, bus, timeline and service per test."""

from __future__ import annotations

import itertools
from datetime import date, datetime, timedelta, timezone

import pytest

from trainings.domain.bus import EventBus
from trainings.domain.handlers import HandlerRegistry
from trainings.domain.models import CallerRole
from trainings.repos.memory import InMemorySessionStore, TimelineRepository
from trainings.services.scheduling import SchedulingService
from trainings.services.window import BookingWindowPolicy

TODAY = date(2026, 6, 1)


def ticking_clock(start: datetime | None = None):
    """A clock that advances one second per call, so created_at never ties."""
    start = start or datetime(2026, 6, 1, 8, 0, tzinfo=timezone.utc)
    ticks = itertools.count()
    return lambda: start + timedelta(seconds=next(ticks))


def make_policies() -> dict[CallerRole, BookingWindowPolicy]:
    return {
        CallerRole.COACH: BookingWindowPolicy(horizon=timedelta(days=21)),
        CallerRole.ADMIN: BookingWindowPolicy(
            horizon=timedelta(days=90), role=CallerRole.ADMIN
        ),
    }


@pytest.fixture()
def env():
    """Fresh store + bus + timeline + service for each test."""
    bus = EventBus()
    store = InMemorySessionStore(clock=ticking_clock())
    timeline_repo = TimelineRepository()
    registry = HandlerRegistry(bus=bus, timeline_repo=timeline_repo)
    service = SchedulingService(
        store=store,
        policies=make_policies(),
        today=lambda: TODAY,
        bus=bus,
    )

    class Env:
        pass

    e = Env()
    e.bus = bus
    e.store = store
    e.timeline_repo = timeline_repo
    e.registry = registry
    e.service = service
    return e

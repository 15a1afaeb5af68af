"""Domain event handlers — wired up at application startup."""

from __future__ import annotations

import logging

from trainings.domain.bus import EventBus
from trainings.domain.events import (
    ParticipantRegistered,
    ParticipantUnregistered,
    SessionCreated,
    SessionDeleted,
    SessionUpdated,
)
from trainings.domain.models import TimelineEntry, TimelineEntryType
from trainings.repos.memory import TimelineRepository

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Wires domain-event handlers to the bus, recording each session's timeline."""

    def __init__(self, bus: EventBus, timeline_repo: TimelineRepository) -> None:
        self.bus = bus
        self.timeline_repo = timeline_repo
        self._register()

    def _register(self) -> None:
        self.bus.subscribe(SessionCreated, self.on_session_created)
        self.bus.subscribe(SessionUpdated, self.on_session_updated)
        self.bus.subscribe(SessionDeleted, self.on_session_deleted)
        self.bus.subscribe(ParticipantRegistered, self.on_participant_registered)
        self.bus.subscribe(ParticipantUnregistered, self.on_participant_unregistered)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_session_created(self, event: SessionCreated) -> None:
        logger.debug("Session %s created by %s", event.session_id, event.owner_id)
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                type=TimelineEntryType.CREATED,
                payload={"owner_id": event.owner_id},
            )
        )

    def on_session_updated(self, event: SessionUpdated) -> None:
        logger.debug("Session %s updated: %s", event.session_id, event.changed_fields)
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                type=TimelineEntryType.UPDATED,
                payload={"changed_fields": event.changed_fields},
            )
        )

    def on_session_deleted(self, event: SessionDeleted) -> None:
        logger.debug("Session %s deleted", event.session_id)
        # Entries for the session are kept after it is deleted.
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                type=TimelineEntryType.DELETED,
                payload={"title": event.title},
            )
        )

    def on_participant_registered(self, event: ParticipantRegistered) -> None:
        logger.debug("Member %s joined session %s", event.member_id, event.session_id)
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                type=TimelineEntryType.PARTICIPANT_REGISTERED,
                payload={"member_id": event.member_id},
            )
        )

    def on_participant_unregistered(self, event: ParticipantUnregistered) -> None:
        logger.debug("Member %s left session %s", event.member_id, event.session_id)
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                type=TimelineEntryType.PARTICIPANT_UNREGISTERED,
                payload={"member_id": event.member_id},
            )
        )

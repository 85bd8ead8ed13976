"""Use case for canceling an event."""

import logging

from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.notifications import notify_event_canceled
from volunteer_api.domain.entities import Event
from volunteer_api.infrastructure.repositories import EventRepository, MatchRepository

from .get_event import get_event

logger = logging.getLogger(__name__)


def delete_event(session: Session, event_id: str) -> Event:
    """Delete the event together with every match that references it."""

    event = get_event(session, event_id)
    removed = MatchRepository(session).bulk_delete(event_id=event.id)
    EventRepository(session).delete(event.id)
    logger.info("Deleted event %s and %s matches", event.id, removed)
    notify_event_canceled(session, event=event)
    return event


__all__ = ["delete_event"]

"""Use case for retrieving a single event."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event
from volunteer_api.domain.errors import NotFoundError
from volunteer_api.infrastructure.repositories import EventRepository

from .validators import ensure_event_identifier


def get_event(session: Session, event_id: str) -> Event:
    """Return the requested event or raise an error if it does not exist."""

    event = EventRepository(session).get(ensure_event_identifier(event_id))
    if event is None:
        raise NotFoundError("Event not found.", entity_id=event_id)
    return event

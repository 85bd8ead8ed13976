"""Use case for listing events."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event
from volunteer_api.infrastructure.repositories import EventRepository


def list_events(session: Session) -> Sequence[Event]:
    return EventRepository(session).list()

"""Use case for recording a notification about an existing event on demand."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Notification
from volunteer_api.domain.errors import InvalidArgumentError, NotFoundError
from volunteer_api.infrastructure.repositories import EventRepository
from volunteer_api.utils import is_valid_identifier

from .events import (
    TITLE_MATCHED,
    TITLE_NEW_EVENT,
    TITLE_UPDATED_EVENT,
    record_notification,
)

NOTIFICATION_TITLES = {
    "new event": TITLE_NEW_EVENT,
    "updated event": TITLE_UPDATED_EVENT,
    "matched event": TITLE_MATCHED,
}


def create_event_notification(
    session: Session,
    *,
    event_id: str,
    notif_type: str,
) -> Notification:
    """Record a notification of kind ``notif_type`` for the given event."""

    if not is_valid_identifier(event_id):
        raise InvalidArgumentError("Invalid eventId format.")

    title = NOTIFICATION_TITLES.get((notif_type or "").strip().lower())
    if title is None:
        raise InvalidArgumentError("Invalid notification type.")

    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found.", entity_id=event_id)

    return record_notification(session, title=title, event=event)


__all__ = ["NOTIFICATION_TITLES", "create_event_notification"]

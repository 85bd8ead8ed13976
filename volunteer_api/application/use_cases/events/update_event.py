"""Use case for editing an event."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import date, datetime

from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.notifications import notify_event_updated
from volunteer_api.domain.entities import Event, Urgency
from volunteer_api.infrastructure.repositories import EventRepository

from .get_event import get_event
from .validators import ensure_event_date, ensure_skills, ensure_text, ensure_urgency


def update_event(
    session: Session,
    *,
    event_id: str,
    event_name: str | None = None,
    event_description: str | None = None,
    location: str | None = None,
    required_skills: Sequence[str] | None = None,
    urgency: Urgency | str | None = None,
    event_date: datetime | date | str | None = None,
) -> Event:
    """Apply the provided changes to an existing event.

    Notifications recorded earlier keep the values they were created with.
    """

    event = get_event(session, event_id)
    changes: dict = {}
    if event_name is not None:
        changes["event_name"] = ensure_text(event_name, field_name="eventName")
    if event_description is not None:
        changes["event_description"] = ensure_text(
            event_description, field_name="eventDescription"
        )
    if location is not None:
        changes["location"] = ensure_text(location, field_name="location")
    if required_skills is not None:
        changes["required_skills"] = ensure_skills(required_skills)
    if urgency is not None:
        changes["urgency"] = ensure_urgency(urgency)
    if event_date is not None:
        changes["event_date"] = ensure_event_date(event_date)

    updated = EventRepository(session).update(replace(event, **changes))
    notify_event_updated(session, event=updated)
    return updated


__all__ = ["update_event"]

"""Use case for publishing a new event."""

from collections.abc import Sequence
from datetime import date, datetime

from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.notifications import notify_event_created
from volunteer_api.domain.entities import Event, Urgency
from volunteer_api.infrastructure.repositories import EventRepository

from .validators import ensure_event_date, ensure_skills, ensure_text, ensure_urgency


def create_event(
    session: Session,
    *,
    event_name: str,
    event_description: str,
    location: str,
    required_skills: Sequence[str],
    urgency: Urgency | str,
    event_date: datetime | date | str,
) -> Event:
    """Persist a new event and announce it."""

    event = Event(
        id=None,
        event_name=ensure_text(event_name, field_name="eventName"),
        event_description=ensure_text(event_description, field_name="eventDescription"),
        location=ensure_text(location, field_name="location"),
        required_skills=ensure_skills(required_skills),
        urgency=ensure_urgency(urgency),
        event_date=ensure_event_date(event_date),
    )
    saved = EventRepository(session).create(event)
    notify_event_created(session, event=saved)
    return saved


__all__ = ["create_event"]

"""Use case for listing the events a volunteer has been matched to."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Urgency
from volunteer_api.domain.errors import InvalidArgumentError
from volunteer_api.infrastructure.repositories import MatchRepository
from volunteer_api.utils import is_valid_identifier


@dataclass(frozen=True)
class HistoryEntry:
    """An event the volunteer was assigned to."""

    event_id: str
    event_name: str
    event_description: str
    location: str
    urgency: Urgency
    event_date: datetime | None
    matched_on: datetime | None
    required_skills: list[str] = field(default_factory=list)


def list_volunteer_history(session: Session, *, user_id: str | None) -> list[HistoryEntry]:
    """Return the matches of ``user_id`` with the details of each event."""

    if not user_id:
        raise InvalidArgumentError("User ID is required")
    if not is_valid_identifier(user_id):
        raise InvalidArgumentError("Invalid userId format.")

    history: list[HistoryEntry] = []
    for match in MatchRepository(session).list_by_user(user_id):
        event = match.event
        if event is None:
            continue
        history.append(
            HistoryEntry(
                event_id=event.id,
                event_name=event.event_name,
                event_description=event.event_description,
                location=event.location,
                urgency=event.urgency,
                event_date=event.event_date,
                matched_on=match.matched_on,
                required_skills=list(event.required_skills),
            )
        )
    return history


__all__ = ["HistoryEntry", "list_volunteer_history"]

"""Use case for finding volunteers whose skills and availability fit an event."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_api.domain.availability import (
    normalize_availability,
    normalize_availability_date,
)
from volunteer_api.domain.entities import Event, Profile
from volunteer_api.domain.errors import NotFoundError, ProcessingError
from volunteer_api.infrastructure.repositories import EventRepository, ProfileRepository

from .validators import ensure_event_id

logger = logging.getLogger(__name__)


def find_candidates(session: Session, *, event_id: str | None) -> list[Profile]:
    """Return the profiles eligible for the event identified by ``event_id``.

    Profiles keep the order the repository returns them in and carry their
    linked user.
    """

    event_id = ensure_event_id(event_id)
    try:
        event = EventRepository(session).get(event_id)
        if event is None:
            raise NotFoundError("Event not found.", entity_id=event_id)
        profiles = ProfileRepository(session).list_with_users()
    except SQLAlchemyError as exc:
        logger.exception("Error matching volunteers for event %s", event_id)
        raise ProcessingError("Error matching volunteers.") from exc

    candidates = filter_candidates(event, profiles)
    logger.info(
        "Matched %s of %s profiles for event %s", len(candidates), len(profiles), event_id
    )
    return candidates


def filter_candidates(event: Event, profiles: Iterable[Profile]) -> list[Profile]:
    """Keep the profiles sharing a skill with ``event`` and available on its date."""

    required_skills = set(event.required_skills or ())
    if not required_skills or event.event_date is None:
        return []

    event_day = normalize_availability_date(event.event_date)
    logger.debug("Normalized event date: %s", event_day.isoformat())
    return [
        profile
        for profile in profiles
        if is_candidate(profile, required_skills=required_skills, event_day=event_day)
    ]


def is_candidate(
    profile: Profile, *, required_skills: set[str], event_day: datetime
) -> bool:
    """Return ``True`` when ``profile`` fits an event on the normalized ``event_day``."""

    if not required_skills.intersection(profile.skills or ()):
        return False
    if not profile.availability:
        return False
    return event_day in normalize_availability(profile.availability)


__all__ = ["filter_candidates", "find_candidates", "is_candidate"]

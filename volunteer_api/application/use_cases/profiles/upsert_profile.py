"""Use case for creating or updating the profile of a user."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.events.validators import ensure_skills
from volunteer_api.application.use_cases.users import get_user
from volunteer_api.domain.entities import Profile
from volunteer_api.infrastructure.repositories import ProfileRepository

from .validators import ensure_length, ensure_state, parse_availability


def upsert_profile(
    session: Session,
    *,
    user_id: str,
    full_name: str | None = None,
    address1: str | None = None,
    address2: str | None = None,
    city: str | None = None,
    state: str | None = None,
    zip: str | None = None,
    skills: Sequence[str] | None = None,
    preferences: str | None = None,
    availability: Sequence[datetime | date | str] | None = None,
) -> tuple[Profile, bool]:
    """Store the profile of ``user_id`` and report whether it was created."""

    get_user(session, user_id)

    profile = Profile(
        id=None,
        user_id=user_id,
        full_name=ensure_length(full_name, field_name="full_name"),
        address1=ensure_length(address1, field_name="address1"),
        address2=ensure_length(address2, field_name="address2"),
        city=ensure_length(city, field_name="city"),
        state=ensure_state(state),
        zip=ensure_length(zip, field_name="zip"),
        skills=ensure_skills(skills),
        preferences=(preferences or "").strip(),
        availability=parse_availability(availability),
    )

    repository = ProfileRepository(session)
    if repository.get_by_user(user_id) is None:
        return repository.create(profile), True
    return repository.update(profile), False


__all__ = ["upsert_profile"]

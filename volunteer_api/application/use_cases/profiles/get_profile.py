"""Use cases for reading volunteer profiles."""

from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.users import get_user
from volunteer_api.domain.entities import Profile
from volunteer_api.domain.errors import InvalidArgumentError, NotFoundError
from volunteer_api.infrastructure.repositories import ProfileRepository
from volunteer_api.utils import is_valid_identifier


def get_profile(session: Session, user_id: str) -> Profile:
    """Return the profile of ``user_id`` or raise an error if there is none."""

    if not is_valid_identifier(user_id):
        raise InvalidArgumentError("Invalid or missing user ID")
    profile = ProfileRepository(session).get_by_user(user_id)
    if profile is None:
        raise NotFoundError("Profile not found", entity_id=user_id)
    return profile


def get_profile_with_role(session: Session, user_id: str) -> tuple[Profile, str]:
    """Return the profile of ``user_id`` together with the user's role."""

    profile = get_profile(session, user_id)
    user = get_user(session, user_id)
    return profile, user.role


__all__ = ["get_profile", "get_profile_with_role"]

"""Use case for the public volunteer sign-up flow."""

import logging

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import ROLE_VOLUNTEER, Profile, User
from volunteer_api.infrastructure.repositories import ProfileRepository

from .create_user import create_user

logger = logging.getLogger(__name__)


def register_volunteer(session: Session, *, name: str, email: str, password: str) -> User:
    """Create a volunteer account together with its empty profile."""

    user = create_user(
        session, name=name, email=email, password=password, role=ROLE_VOLUNTEER
    )
    ProfileRepository(session).create(Profile(id=None, user_id=user.id))
    logger.info("Registered volunteer %s with an empty profile", user.id)
    return user


__all__ = ["register_volunteer"]

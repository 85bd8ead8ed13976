"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import User
from volunteer_api.domain.errors import InvalidArgumentError, NotFoundError
from volunteer_api.infrastructure.repositories import UserRepository
from volunteer_api.utils import is_valid_identifier


def get_user(session: Session, user_id: str) -> User:
    """Return the requested user or raise an error if it does not exist."""

    if not is_valid_identifier(user_id):
        raise InvalidArgumentError("Invalid or missing user ID")
    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("User not found", entity_id=user_id)
    return user

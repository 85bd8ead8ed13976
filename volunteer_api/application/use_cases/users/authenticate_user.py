"""Use case for authenticating a user."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import User
from volunteer_api.infrastructure.repositories import UserRepository
from volunteer_api.infrastructure.security import verify_password


def authenticate_user(session: Session, email: str, password: str) -> User | None:
    """Return the user owning ``email`` when ``password`` matches, else ``None``."""

    user = UserRepository(session).get_by_email(email)
    if user is None:
        return None
    if not verify_password(password, user.password):
        return None
    return user

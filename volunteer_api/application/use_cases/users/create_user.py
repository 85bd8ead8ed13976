"""Use case for creating users."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import ROLE_VOLUNTEER, ROLES, User
from volunteer_api.domain.errors import InvalidArgumentError
from volunteer_api.infrastructure.repositories import UserRepository
from volunteer_api.infrastructure.security import get_password_hash
from volunteer_api.utils import now_in_app_timezone

from .validators import ensure_password, normalize_email

EMAIL_IN_USE_MESSAGE = "Email already in use"


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: str = ROLE_VOLUNTEER,
) -> User:
    """Create a new user ensuring unique email addresses."""

    try:
        normalized_email = normalize_email(email)
        ensure_password(password)
    except ValueError as exc:
        raise InvalidArgumentError(str(exc)) from exc

    if role not in ROLES:
        raise InvalidArgumentError("Role not allowed")

    name = (name or "").strip()
    if not name:
        raise InvalidArgumentError("Name is required")

    repository = UserRepository(session)
    if repository.get_by_email(normalized_email):
        raise InvalidArgumentError(EMAIL_IN_USE_MESSAGE)

    user = User(
        id=None,
        name=name,
        email=normalized_email,
        password=get_password_hash(password),
        role=role,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)


__all__ = ["EMAIL_IN_USE_MESSAGE", "create_user"]

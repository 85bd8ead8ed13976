"""Use case for listing recorded notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Notification
from volunteer_api.domain.errors import InvalidArgumentError
from volunteer_api.infrastructure.repositories import NotificationRepository
from volunteer_api.utils import is_valid_identifier


def list_notifications(
    session: Session,
    *,
    user_id: str | None = None,
    limit: int | None = None,
) -> Sequence[Notification]:
    """Return notifications newest first, optionally only those of ``user_id``."""

    if user_id is not None and not is_valid_identifier(user_id):
        raise InvalidArgumentError("Invalid userId format.")
    return NotificationRepository(session).list(user_id=user_id, limit=limit)


__all__ = ["list_notifications"]

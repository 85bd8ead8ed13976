"""Use case for assigning volunteers to an event."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.notifications import notify_volunteers_matched
from volunteer_api.domain.entities import Match
from volunteer_api.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ProcessingError,
)
from volunteer_api.infrastructure.repositories import (
    EventRepository,
    MatchRepository,
    UserRepository,
)

from .validators import ensure_event_id, ensure_user_ids

logger = logging.getLogger(__name__)

ALREADY_ASSIGNED_MESSAGE = "All users are already assigned to this event."


def assign_volunteers(
    session: Session,
    *,
    event_id: str | None,
    user_ids: Sequence[str],
) -> list[Match]:
    """Assign ``user_ids`` to the event and return only the new matches.

    Users already assigned to the event are skipped. When nobody new is
    assigned a :class:`ConflictError` is raised. Matches are committed before
    any notification is recorded; a failure while notifying leaves the
    matches in place and is reported as :class:`ProcessingError`.
    """

    event_id = ensure_event_id(event_id)
    if not user_ids:
        raise InvalidArgumentError(
            "At least one userId must be provided for assignment."
        )
    requested = ensure_user_ids(user_ids)

    match_repository = MatchRepository(session)
    try:
        event = EventRepository(session).get(event_id)
        if event is None:
            raise NotFoundError("Event not found.", entity_id=event_id)

        users = UserRepository(session).list_by_ids(requested)
        if len(users) != len(requested):
            raise NotFoundError("One or more users not found.")

        already_assigned = {
            match.user_id
            for match in match_repository.list_by_event(event_id, user_ids=requested)
        }
        pending = [user_id for user_id in requested if user_id not in already_assigned]
        if not pending:
            raise ConflictError(ALREADY_ASSIGNED_MESSAGE)

        created = match_repository.bulk_create(
            [Match(id=None, user_id=user_id, event_id=event_id) for user_id in pending]
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error assigning volunteers to event %s", event_id)
        raise ProcessingError("Error processing request.") from exc

    if not created:
        # Every pending row lost a race against a concurrent assignment.
        raise ConflictError(ALREADY_ASSIGNED_MESSAGE)

    logger.info(
        "Assigned %s volunteers to event %s (%s skipped)",
        len(created),
        event_id,
        len(requested) - len(created),
    )

    try:
        notify_volunteers_matched(
            session, event=event, user_ids=[match.user_id for match in created]
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "Volunteers were assigned to event %s but notifications could not be recorded",
            event_id,
        )
        raise ProcessingError("Error processing request.") from exc

    return created


__all__ = ["ALREADY_ASSIGNED_MESSAGE", "assign_volunteers"]

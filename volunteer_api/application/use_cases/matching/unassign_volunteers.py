"""Use case for removing volunteers from an event."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.notifications import notify_volunteers_unassigned
from volunteer_api.config import get_settings
from volunteer_api.domain.entities import Notification
from volunteer_api.domain.errors import NotFoundError, ProcessingError
from volunteer_api.infrastructure.repositories import EventRepository, MatchRepository

from .validators import ensure_event_id, ensure_user_ids

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No matches found to unassign."


@dataclass(frozen=True)
class UnassignmentResult:
    """Outcome of an unassignment request."""

    deleted_count: int
    notifications: list[Notification] = field(default_factory=list)


def unassign_volunteers(
    session: Session,
    *,
    event_id: str | None,
    user_ids: Sequence[str] | None = None,
) -> UnassignmentResult:
    """Remove the given users, or every user when ``user_ids`` is empty, from the event.

    Targeted removals record one notification per requested user. Clearing
    the whole event only notifies when ``NOTIFY_ON_UNASSIGN_ALL`` is enabled.
    """

    event_id = ensure_event_id(event_id)
    requested = ensure_user_ids(user_ids or [])

    if requested:
        return _unassign_selected(session, event_id=event_id, user_ids=requested)
    return _unassign_all(session, event_id=event_id)


def _unassign_selected(
    session: Session, *, event_id: str, user_ids: list[str]
) -> UnassignmentResult:
    try:
        deleted = MatchRepository(session).bulk_delete(event_id=event_id, user_ids=user_ids)
        if deleted == 0:
            raise NotFoundError(NO_MATCHES_MESSAGE)

        event = EventRepository(session).get(event_id)
        if event is None:
            raise NotFoundError("Event not found.", entity_id=event_id)

        notifications = notify_volunteers_unassigned(
            session, event=event, user_ids=user_ids
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error unassigning volunteers from event %s", event_id)
        raise ProcessingError("Error processing request.") from exc

    logger.info("Unassigned %s volunteers from event %s", deleted, event_id)
    return UnassignmentResult(deleted_count=deleted, notifications=notifications)


def _unassign_all(session: Session, *, event_id: str) -> UnassignmentResult:
    notify = get_settings().notify_on_unassign_all
    match_repository = MatchRepository(session)
    try:
        affected = (
            [match.user_id for match in match_repository.list_by_event(event_id)]
            if notify
            else []
        )
        deleted = match_repository.bulk_delete(event_id=event_id)
        if deleted == 0:
            raise NotFoundError(NO_MATCHES_MESSAGE)

        notifications: list[Notification] = []
        if notify and affected:
            event = EventRepository(session).get(event_id)
            if event is not None:
                notifications = notify_volunteers_unassigned(
                    session, event=event, user_ids=affected
                )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error clearing volunteers from event %s", event_id)
        raise ProcessingError("Error processing request.") from exc

    logger.info("Unassigned all %s volunteers from event %s", deleted, event_id)
    return UnassignmentResult(deleted_count=deleted, notifications=notifications)


__all__ = ["NO_MATCHES_MESSAGE", "UnassignmentResult", "unassign_volunteers"]

"""Utility helpers to record domain notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event, Notification
from volunteer_api.infrastructure.repositories import NotificationRepository
from volunteer_api.utils import now_in_app_timezone

TITLE_MATCHED = "You Have Been Matched To An Event!"
TITLE_UNASSIGNED = "You Have Been Unassigned From An Event"
TITLE_NEW_EVENT = "A New Event Has Been Posted!"
TITLE_UPDATED_EVENT = "An Event Has Been Updated"
TITLE_CANCELED_EVENT = "An Event Has Been Canceled"
TITLE_UPCOMING_EVENT = "Upcoming Event Alert!"


def build_notification(
    *,
    title: str,
    event: Event,
    user_id: str | None = None,
    link_event: bool = True,
) -> Notification:
    """Return an unsaved notification carrying a snapshot of ``event``."""

    return Notification(
        id=None,
        title=title,
        event_id=event.id if link_event else None,
        event_name=event.event_name,
        event_description=event.event_description,
        location=event.location,
        event_date=event.event_date,
        user_id=user_id,
        created_at=now_in_app_timezone(),
    )


def record_notification(
    session: Session,
    *,
    title: str,
    event: Event,
    user_id: str | None = None,
    link_event: bool = True,
) -> Notification:
    """Persist a single notification about ``event``."""

    notification = build_notification(
        title=title, event=event, user_id=user_id, link_event=link_event
    )
    return NotificationRepository(session).create(notification)


def record_notifications(
    session: Session,
    *,
    title: str,
    event: Event,
    user_ids: Sequence[str],
) -> list[Notification]:
    """Persist one notification about ``event`` for every user in ``user_ids``."""

    notifications = [
        build_notification(title=title, event=event, user_id=user_id)
        for user_id in user_ids
    ]
    return NotificationRepository(session).bulk_create(notifications)


def notify_volunteers_matched(
    session: Session, *, event: Event, user_ids: Sequence[str]
) -> list[Notification]:
    return record_notifications(session, title=TITLE_MATCHED, event=event, user_ids=user_ids)


def notify_volunteers_unassigned(
    session: Session, *, event: Event, user_ids: Sequence[str]
) -> list[Notification]:
    return record_notifications(
        session, title=TITLE_UNASSIGNED, event=event, user_ids=user_ids
    )


def notify_event_created(session: Session, *, event: Event) -> Notification:
    """Announce a newly posted event to every volunteer."""

    return record_notification(session, title=TITLE_NEW_EVENT, event=event)


def notify_event_updated(session: Session, *, event: Event) -> Notification:
    return record_notification(session, title=TITLE_UPDATED_EVENT, event=event)


def notify_event_canceled(session: Session, *, event: Event) -> Notification:
    """Record the cancellation of ``event``.

    The event row is about to disappear, so only the snapshot is kept.
    """

    return record_notification(
        session, title=TITLE_CANCELED_EVENT, event=event, link_event=False
    )


__all__ = [
    "TITLE_CANCELED_EVENT",
    "TITLE_MATCHED",
    "TITLE_NEW_EVENT",
    "TITLE_UNASSIGNED",
    "TITLE_UPCOMING_EVENT",
    "TITLE_UPDATED_EVENT",
    "build_notification",
    "notify_event_canceled",
    "notify_event_created",
    "notify_event_updated",
    "notify_volunteers_matched",
    "notify_volunteers_unassigned",
    "record_notification",
    "record_notifications",
]

"""Scheduled sweep that reminds volunteers about upcoming events."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from volunteer_api.config import get_settings
from volunteer_api.infrastructure.repositories import EventRepository, NotificationRepository
from volunteer_api.utils import ensure_app_timezone, now_in_app_timezone

from .events import TITLE_UPCOMING_EVENT, build_notification

logger = logging.getLogger(__name__)


def send_upcoming_event_reminders(
    session: Session,
    *,
    now: datetime | None = None,
    window: timedelta | None = None,
) -> int:
    """Record an "upcoming event" notification for events starting soon.

    Every event dated between ``now`` and ``now + window`` gets one
    notification per run. Returns the number of notifications created.
    """

    start = ensure_app_timezone(now) or now_in_app_timezone()
    if window is None:
        window = timedelta(hours=get_settings().reminder_window_hours)
    end = start + window

    upcoming = EventRepository(session).list_between(start, end)
    notifications = [
        build_notification(title=TITLE_UPCOMING_EVENT, event=event) for event in upcoming
    ]
    saved = NotificationRepository(session).bulk_create(notifications)
    logger.info(
        "Notifications created for %s upcoming events between %s and %s",
        len(saved),
        start.isoformat(),
        end.isoformat(),
    )
    return len(saved)


__all__ = ["send_upcoming_event_reminders"]

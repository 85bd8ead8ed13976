"""Public helpers for recording domain notifications."""

from .create_event_notification import NOTIFICATION_TITLES, create_event_notification
from .events import (
    TITLE_CANCELED_EVENT,
    TITLE_MATCHED,
    TITLE_NEW_EVENT,
    TITLE_UNASSIGNED,
    TITLE_UPCOMING_EVENT,
    TITLE_UPDATED_EVENT,
    notify_event_canceled,
    notify_event_created,
    notify_event_updated,
    notify_volunteers_matched,
    notify_volunteers_unassigned,
    record_notification,
    record_notifications,
)
from .list_notifications import list_notifications
from .reminders import send_upcoming_event_reminders

__all__ = [
    "NOTIFICATION_TITLES",
    "TITLE_CANCELED_EVENT",
    "TITLE_MATCHED",
    "TITLE_NEW_EVENT",
    "TITLE_UNASSIGNED",
    "TITLE_UPCOMING_EVENT",
    "TITLE_UPDATED_EVENT",
    "create_event_notification",
    "list_notifications",
    "notify_event_canceled",
    "notify_event_created",
    "notify_event_updated",
    "notify_volunteers_matched",
    "notify_volunteers_unassigned",
    "record_notification",
    "record_notifications",
    "send_upcoming_event_reminders",
]

"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """Notice recorded for volunteers.

    The event fields are copied when the notification is created and are never
    refreshed when the event changes afterwards.
    """

    id: str | None
    title: str
    event_id: str | None = None
    event_name: str | None = None
    event_description: str | None = None
    location: str | None = None
    event_date: datetime | None = None
    user_id: str | None = None
    created_at: datetime | None = None


__all__ = ["Notification"]

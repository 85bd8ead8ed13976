"""Domain entity linking a volunteer to an event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .event import Event
from .user import User


@dataclass
class Match:
    """Assignment of one user to one event."""

    id: str | None
    user_id: str
    event_id: str
    matched_on: datetime | None = None
    user: User | None = None
    event: Event | None = None


__all__ = ["Match"]

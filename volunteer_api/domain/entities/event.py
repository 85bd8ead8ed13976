"""Domain entity representing an event that needs volunteers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Urgency(str, Enum):
    """How pressing it is to staff an event."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass
class Event:
    """An occasion staff publish so volunteers can be matched to it."""

    id: str | None
    event_name: str
    event_description: str
    location: str
    required_skills: list[str] = field(default_factory=list)
    urgency: Urgency = Urgency.LOW
    event_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Event", "Urgency"]

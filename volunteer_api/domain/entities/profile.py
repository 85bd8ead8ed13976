"""Domain entity representing a volunteer profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final

from .user import User

SKILLS: Final[tuple[str, ...]] = (
    "Food Preparation & Serving",
    "Cleaning & Sanitation",
    "First Aid & CPR",
    "Event Planning & Coordination",
    "Counseling & Emotional Support",
    "Child Care",
    "Administrative & Clerical Work",
    "Language Translation & Interpretation",
    "Transportation & Driving",
    "Handyman Skills (Basic Repairs & Maintenance)",
)

US_STATES: Final[tuple[str, ...]] = (
    "", "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID",
    "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO",
    "MT", "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA",
    "RI", "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)


@dataclass
class Profile:
    """Skills and availability a volunteer declares, one per user."""

    id: str | None
    user_id: str
    full_name: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    skills: list[str] = field(default_factory=list)
    preferences: str = ""
    availability: list[datetime] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: User | None = None


__all__ = ["Profile", "SKILLS", "US_STATES"]

"""Domain entities exposed by the application."""

from .event import Event, Urgency
from .match import Match
from .notification import Notification
from .profile import SKILLS, US_STATES, Profile
from .user import ROLE_ADMIN, ROLE_VOLUNTEER, ROLES, User

__all__ = [
    "Event",
    "Urgency",
    "Match",
    "Notification",
    "Profile",
    "SKILLS",
    "US_STATES",
    "ROLE_ADMIN",
    "ROLE_VOLUNTEER",
    "ROLES",
    "User",
]

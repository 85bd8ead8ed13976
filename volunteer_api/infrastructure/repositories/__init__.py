"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .match_repository import MatchRepository
from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository
from .user_repository import UserRepository

__all__ = [
    "EventRepository",
    "MatchRepository",
    "NotificationRepository",
    "ProfileRepository",
    "UserRepository",
]

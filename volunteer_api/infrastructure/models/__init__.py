"""ORM models used by the application infrastructure."""

from .event import EventModel
from .match import MatchModel
from .notification import NotificationModel
from .profile import ProfileModel
from .user import UserModel

__all__ = [
    "EventModel",
    "MatchModel",
    "NotificationModel",
    "ProfileModel",
    "UserModel",
]

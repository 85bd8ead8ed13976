"""Use cases for managing users."""

from .authenticate_user import authenticate_user
from .create_user import EMAIL_IN_USE_MESSAGE, create_user
from .get_user import get_user
from .register_volunteer import register_volunteer

__all__ = [
    "EMAIL_IN_USE_MESSAGE",
    "authenticate_user",
    "create_user",
    "get_user",
    "register_volunteer",
]

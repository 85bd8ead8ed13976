"""Aggregate application use cases."""

from .matching import assign_volunteers, find_candidates, unassign_volunteers
from .users import authenticate_user, create_user, register_volunteer

__all__ = [
    "assign_volunteers",
    "authenticate_user",
    "create_user",
    "find_candidates",
    "register_volunteer",
    "unassign_volunteers",
]

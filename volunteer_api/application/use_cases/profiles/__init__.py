"""Use cases for volunteer profiles."""

from .get_profile import get_profile, get_profile_with_role
from .upsert_profile import upsert_profile

__all__ = ["get_profile", "get_profile_with_role", "upsert_profile"]

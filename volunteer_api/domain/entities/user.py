"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_VOLUNTEER = "volunteer"
ROLE_ADMIN = "admin"
ROLES = (ROLE_VOLUNTEER, ROLE_ADMIN)


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str | None
    name: str
    email: str
    password: str
    role: str = ROLE_VOLUNTEER
    created_at: datetime | None = None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.lower() == role.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)


__all__ = ["ROLES", "ROLE_ADMIN", "ROLE_VOLUNTEER", "User"]

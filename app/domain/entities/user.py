"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Person who purchases, holds or gets notified about assets."""

    id: str | None
    name: str
    email: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_admin(self) -> bool:
        """Return ``True`` when the user belongs to the administrator role."""

        return self.role.lower() == "admin"


__all__ = ["User"]

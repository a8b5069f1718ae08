"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


from .role import Role


@dataclass
class User:
    """Core attributes describing a site user."""

    id: int | None
    role: Role
    name: str
    email: str
    created_at: datetime | None = None

    def raw_capabilities(self) -> dict[str, bool]:
        """Return the capability flags granted by the user's role.

        The role alias itself is included as a flag so capability filters
        can restrict features by role.
        """

        capabilities = {capability: True for capability in self.role.capabilities}
        capabilities[self.role.alias.lower()] = True
        return capabilities

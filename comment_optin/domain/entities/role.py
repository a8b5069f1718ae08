"""Domain entity representing a user role."""

from dataclasses import dataclass, field


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int
    name: str
    alias: str
    capabilities: tuple[str, ...] = field(default_factory=tuple)


__all__ = ["Role"]

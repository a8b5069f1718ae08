"""Default site roles and the capabilities they grant."""

from __future__ import annotations

from sqlalchemy.orm import Session

from comment_optin.domain.entities import Role
from comment_optin.infrastructure.repositories import RoleRepository

DEFAULT_ROLES: dict[str, tuple[str, tuple[str, ...]]] = {
    "administrator": (
        "Administrator",
        ("moderate_comments", "edit_users", "edit_posts", "read"),
    ),
    "editor": ("Editor", ("moderate_comments", "edit_posts", "read")),
    "author": ("Author", ("edit_posts", "read")),
    "contributor": ("Contributor", ("edit_posts", "read")),
    "subscriber": ("Subscriber", ("read",)),
}


def ensure_default_roles(session: Session) -> list[Role]:
    """Create any missing default role and return all of them."""

    repository = RoleRepository(session)
    roles: list[Role] = []
    for alias, (name, capabilities) in DEFAULT_ROLES.items():
        role = repository.get_by_alias(alias)
        if role is None:
            role = repository.create(
                Role(id=0, name=name, alias=alias, capabilities=capabilities)
            )
        roles.append(role)
    return roles


__all__ = ["DEFAULT_ROLES", "ensure_default_roles"]

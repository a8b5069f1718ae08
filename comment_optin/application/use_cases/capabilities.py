"""Capability checks for the all-comments subscription."""

from __future__ import annotations

import logging

from comment_optin.config import OptinConfig
from comment_optin.domain.entities import User
from comment_optin.infrastructure.hooks import HAS_CAP_HOOK, HookRegistry, hooks

logger = logging.getLogger(__name__)


class CapabilityResolver:
    """Decide whether users may subscribe to every comment on the site.

    Every user is capable by default. Deployments narrow this down by adding
    filters to :data:`HAS_CAP_HOOK`; each filter receives the current result
    and the user's raw capability map and returns the new result.
    """

    def __init__(self, config: OptinConfig, registry: HookRegistry = hooks) -> None:
        self.config = config
        self.registry = registry

    def resolve(self, user: User) -> bool:
        """Return ``True`` when ``user`` may subscribe to all comments."""

        allowed = self.registry.apply_filters(
            HAS_CAP_HOOK, True, user.raw_capabilities()
        )
        return bool(allowed)

    def capabilities_for(self, user: User) -> dict[str, bool]:
        """Return the raw capability map extended with the derived capability."""

        capabilities = user.raw_capabilities()
        capabilities[self.config.capability] = self.resolve(user)
        return capabilities

    def user_can(self, user: User, capability: str) -> bool:
        return self.capabilities_for(user).get(capability, False)

    def can_edit_user(self, actor: User, target_user_id: int) -> bool:
        """Users may edit themselves; editing others needs the edit-users capability."""

        if actor.id is not None and actor.id == target_user_id:
            return True
        return self.user_can(actor, self.config.edit_users_capability)


__all__ = ["CapabilityResolver"]

"""Bind the opt-in flag to the checkbox shown on the user settings page."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from comment_optin.application.use_cases.capabilities import CapabilityResolver
from comment_optin.config import OptinConfig
from comment_optin.domain.entities import User

from .store import PreferenceStore, save_preference

CONTROL_LABEL = "New Comment Emails"
CONTROL_DESCRIPTION = "Email me whenever a comment is submitted to the site."


@dataclass(frozen=True)
class PreferenceControl:
    """Checkbox describing the user's current opt-in state."""

    name: str
    value: str
    checked: bool
    label: str = CONTROL_LABEL
    description: str = CONTROL_DESCRIPTION


def render_control(
    session: Session,
    user: User,
    *,
    config: OptinConfig,
    capabilities: CapabilityResolver,
) -> PreferenceControl | None:
    """Return the checkbox for ``user`` or ``None`` when it must not be shown."""

    if not capabilities.resolve(user):
        return None

    return PreferenceControl(
        name=config.option_name,
        value=config.yes_value,
        checked=PreferenceStore(session, config).get_preference(user.id),
    )


def handle_save(
    session: Session,
    *,
    target_user_id: int,
    submitted_value: str | None,
    acting_user: User,
    config: OptinConfig,
    capabilities: CapabilityResolver,
) -> bool:
    """Save the submitted checkbox value; anything but the sentinel opts out."""

    return save_preference(
        session,
        target_user_id=target_user_id,
        opted_in=submitted_value == config.yes_value,
        acting_user=acting_user,
        config=config,
        capabilities=capabilities,
    )


__all__ = [
    "CONTROL_DESCRIPTION",
    "CONTROL_LABEL",
    "PreferenceControl",
    "handle_save",
    "render_control",
]

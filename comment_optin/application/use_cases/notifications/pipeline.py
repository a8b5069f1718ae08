"""Entry points the comment notification pipeline calls to build recipient lists."""

from __future__ import annotations

from collections.abc import Iterable

from comment_optin.infrastructure.hooks import (
    COMMENT_MODERATION_RECIPIENTS,
    COMMENT_NOTIFICATION_RECIPIENTS,
    HookRegistry,
    hooks,
)


def comment_notification_recipients(
    comment_id: int, emails: Iterable[str], *, registry: HookRegistry = hooks
) -> list[str]:
    """Return the recipients for the email sent when a comment is published."""

    return list(registry.apply_filters(COMMENT_NOTIFICATION_RECIPIENTS, list(emails), comment_id))


def comment_moderation_recipients(
    comment_id: int, emails: Iterable[str], *, registry: HookRegistry = hooks
) -> list[str]:
    """Return the recipients for the email asking to moderate a held comment."""

    return list(registry.apply_filters(COMMENT_MODERATION_RECIPIENTS, list(emails), comment_id))


__all__ = ["comment_moderation_recipients", "comment_notification_recipients"]

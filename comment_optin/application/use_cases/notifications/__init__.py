"""Public helpers for building comment notification recipient lists."""

from .pipeline import comment_moderation_recipients, comment_notification_recipients
from .recipients import (
    OptinRecipientsFilter,
    RecipientResolver,
    add_comment_notification_recipients,
    register_optin_hooks,
    unregister_optin_hooks,
)

__all__ = [
    "OptinRecipientsFilter",
    "RecipientResolver",
    "add_comment_notification_recipients",
    "comment_moderation_recipients",
    "comment_notification_recipients",
    "register_optin_hooks",
    "unregister_optin_hooks",
]

"""Add users who opted into all-comment emails to a comment's recipients."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Callable, Protocol

from sqlalchemy.orm import Session

from comment_optin.application.use_cases.capabilities import CapabilityResolver
from comment_optin.config import OptinConfig
from comment_optin.domain.entities import Comment, User
from comment_optin.domain.errors import CommentNotFoundError
from comment_optin.infrastructure.hooks import (
    COMMENT_MODERATION_RECIPIENTS,
    COMMENT_NOTIFICATION_RECIPIENTS,
    HookRegistry,
    hooks,
)
from comment_optin.infrastructure.repositories import CommentRepository, UserRepository

logger = logging.getLogger(__name__)

RECIPIENT_HOOKS = (COMMENT_NOTIFICATION_RECIPIENTS, COMMENT_MODERATION_RECIPIENTS)


class OptedInUserSource(Protocol):
    def list_by_option(self, option_name: str, option_value: str) -> Sequence[User]:
        ...


class RecipientResolver:
    """Compute the extra email addresses to notify about a comment."""

    def __init__(
        self,
        users: OptedInUserSource,
        capabilities: CapabilityResolver,
        config: OptinConfig,
    ) -> None:
        self.users = users
        self.capabilities = capabilities
        self.config = config

    def resolve_recipients(self, existing_emails: Iterable[str], comment: Comment) -> list[str]:
        """Return ``existing_emails`` followed by every eligible opted-in address.

        Existing entries are kept as given and in order. New addresses are
        appended once, in the order the user query returns their owners.
        """

        recipients = list(existing_emails)
        seen = set(recipients)
        added = 0

        for user in self.users.list_by_option(self.config.meta_key, self.config.yes_value):
            if not self._is_eligible(user, comment):
                continue
            if user.email in seen:
                continue
            seen.add(user.email)
            recipients.append(user.email)
            added += 1

        logger.info("Added %s opted-in recipient(s) for comment %s", added, comment.id)
        return recipients

    def _is_eligible(self, user: User, comment: Comment) -> bool:
        # Don't notify a user about their own comment.
        if not comment.is_anonymous() and user.id == comment.user_id:
            logger.debug("Skipping user %s: author of comment %s", user.id, comment.id)
            return False

        if not self.capabilities.resolve(user):
            logger.debug("Skipping user %s: not allowed to subscribe", user.id)
            return False

        if comment.is_pending() and not user.raw_capabilities().get(
            self.config.moderate_capability, False
        ):
            logger.debug(
                "Skipping user %s: cannot moderate pending comment %s", user.id, comment.id
            )
            return False

        return True


def add_comment_notification_recipients(
    session: Session,
    emails: Iterable[str],
    comment_id: int,
    *,
    config: OptinConfig,
    registry: HookRegistry = hooks,
) -> list[str]:
    """Augment ``emails`` for the comment identified by ``comment_id``."""

    comment = CommentRepository(session).get(comment_id)
    if comment is None:
        raise CommentNotFoundError(comment_id)

    resolver = RecipientResolver(
        UserRepository(session),
        CapabilityResolver(config, registry),
        config,
    )
    return resolver.resolve_recipients(emails, comment)


class OptinRecipientsFilter:
    """Recipient hook callback opening its own session per invocation."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        config: OptinConfig,
        registry: HookRegistry,
    ) -> None:
        self.session_factory = session_factory
        self.config = config
        self.registry = registry
        self.registrations = 0

    def matches(self, session_factory: Callable[[], Session], config: OptinConfig) -> bool:
        return self.session_factory is session_factory and self.config == config

    def __call__(self, emails: Iterable[str], comment_id: int) -> list[str]:
        with self.session_factory() as session:
            return add_comment_notification_recipients(
                session,
                emails,
                comment_id,
                config=self.config,
                registry=self.registry,
            )


def register_optin_hooks(
    registry: HookRegistry,
    *,
    session_factory: Callable[[], Session],
    config: OptinConfig,
) -> OptinRecipientsFilter:
    """Attach the opt-in recipients filter to the new-comment and moderation hooks.

    A registry holds at most one opt-in filter. Registering again with the same
    session factory and config returns the existing filter and counts the extra
    registration, so it stays attached until every caller unregisters it.
    Registering with a different session factory or config replaces the
    existing filter.
    """

    for existing in registry.callbacks(COMMENT_NOTIFICATION_RECIPIENTS):
        if not isinstance(existing, OptinRecipientsFilter):
            continue
        if existing.matches(session_factory, config):
            existing.registrations += 1
            return existing
        logger.info("Replacing the opt-in recipients filter on %s", RECIPIENT_HOOKS)
        _detach(registry, existing)

    callback = OptinRecipientsFilter(session_factory, config, registry)
    callback.registrations = 1
    for name in RECIPIENT_HOOKS:
        registry.add_filter(name, callback)
    return callback


def unregister_optin_hooks(registry: HookRegistry, callback: OptinRecipientsFilter) -> None:
    """Drop one registration of ``callback``, detaching it after the last one."""

    callback.registrations = max(callback.registrations - 1, 0)
    if callback.registrations == 0:
        _detach(registry, callback)


def _detach(registry: HookRegistry, callback: OptinRecipientsFilter) -> None:
    callback.registrations = 0
    for name in RECIPIENT_HOOKS:
        registry.remove_filter(name, callback)


__all__ = [
    "OptedInUserSource",
    "OptinRecipientsFilter",
    "RECIPIENT_HOOKS",
    "RecipientResolver",
    "add_comment_notification_recipients",
    "register_optin_hooks",
    "unregister_optin_hooks",
]

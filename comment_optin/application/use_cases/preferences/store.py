"""Read and write the all-comments opt-in flag for a user."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from comment_optin.application.use_cases.capabilities import CapabilityResolver
from comment_optin.config import OptinConfig
from comment_optin.domain.entities import User
from comment_optin.domain.errors import PreferenceStoreUnavailable
from comment_optin.infrastructure.repositories import UserOptionRepository

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Accessor for the opt-in flag.

    The flag is stored as the configured sentinel when the user opted in and
    is absent otherwise; an explicit "no" is never persisted.
    """

    def __init__(self, session: Session, config: OptinConfig) -> None:
        self.session = session
        self.config = config
        self.repository = UserOptionRepository(session)

    def get_preference(self, user_id: int) -> bool:
        try:
            value = self.repository.get(user_id, self.config.meta_key)
        except SQLAlchemyError as exc:
            raise self._store_error("read", user_id) from exc
        return value == self.config.yes_value

    def set_preference(self, user_id: int, opted_in: bool) -> bool:
        """Store or clear the flag, returning ``True`` once the store matches ``opted_in``."""

        try:
            if opted_in:
                self.repository.set(user_id, self.config.meta_key, self.config.yes_value)
            else:
                self.repository.delete(user_id, self.config.meta_key)
        except SQLAlchemyError as exc:
            raise self._store_error("write", user_id) from exc
        return True

    def _store_error(self, action: str, user_id: int) -> PreferenceStoreUnavailable:
        self.session.rollback()
        logger.exception("Could not %s the comment opt-in flag for user %s", action, user_id)
        return PreferenceStoreUnavailable(
            f"Comment opt-in storage unavailable while trying to {action} user {user_id}"
        )


def save_preference(
    session: Session,
    *,
    target_user_id: int,
    opted_in: bool,
    acting_user: User,
    config: OptinConfig,
    capabilities: CapabilityResolver,
) -> bool:
    """Persist ``opted_in`` for ``target_user_id`` if ``acting_user`` is allowed to.

    Returns ``False`` without touching the store when the acting user cannot
    edit the target user or lacks the subscription capability.
    """

    if not capabilities.can_edit_user(acting_user, target_user_id) or not capabilities.resolve(
        acting_user
    ):
        logger.warning(
            "User %s is not allowed to change the comment opt-in of user %s",
            acting_user.id,
            target_user_id,
        )
        return False

    saved = PreferenceStore(session, config).set_preference(target_user_id, opted_in)
    logger.info(
        "User %s set the comment opt-in of user %s to %s",
        acting_user.id,
        target_user_id,
        opted_in,
    )
    return saved


__all__ = ["PreferenceStore", "save_preference"]

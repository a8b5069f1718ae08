"""Persistence layer for comments."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from comment_optin.domain.entities import Comment, CommentStatus
from comment_optin.infrastructure.models import CommentModel

logger = logging.getLogger(__name__)

_STATUS_BY_VALUE = {status.value: status for status in CommentStatus}


class CommentRepository:
    """Provide read and create operations for :class:`Comment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            user_id=comment.user_id,
            author_name=comment.author_name,
            author_email=comment.author_email,
            content=comment.content,
            approved=comment.status.value,
        )
        if comment.created_at is not None:
            model.created_at = comment.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            user_id=model.user_id,
            author_name=model.author_name,
            author_email=model.author_email,
            content=model.content,
            status=CommentRepository._status_from_value(model.id, model.approved),
            created_at=model.created_at,
        )

    @staticmethod
    def _status_from_value(comment_id: int, value: str | None) -> CommentStatus:
        """Map the stored approval value, treating unknown values as held for moderation."""

        status = _STATUS_BY_VALUE.get(value or "")
        if status is None:
            logger.warning(
                "Comment %s has unknown approval value %r; treating it as pending",
                comment_id,
                value,
            )
            return CommentStatus.PENDING
        return status


__all__ = ["CommentRepository"]

"""Domain entity representing a comment posted on the site."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class CommentStatus(str, Enum):
    """Approval state of a comment as stored by the host platform."""

    APPROVED = "1"
    PENDING = "0"
    SPAM = "spam"


@dataclass
class Comment:
    """A comment and the user who wrote it, if any."""

    id: int | None
    user_id: int | None
    author_name: str
    author_email: str | None
    content: str
    status: CommentStatus = CommentStatus.APPROVED
    created_at: datetime | None = None

    def is_pending(self) -> bool:
        """Return ``True`` when the comment awaits moderation."""

        return self.status is CommentStatus.PENDING

    def is_anonymous(self) -> bool:
        return self.user_id is None


__all__ = ["Comment", "CommentStatus"]

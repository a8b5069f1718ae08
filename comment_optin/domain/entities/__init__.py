"""Domain entities exposed by the application."""

from .comment import Comment, CommentStatus
from .role import Role
from .user import User

__all__ = [
    "Comment",
    "CommentStatus",
    "Role",
    "User",
]

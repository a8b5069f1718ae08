"""Repository implementations for infrastructure layer."""

from .comment_repository import CommentRepository
from .role_repository import RoleRepository
from .user_option_repository import UserOptionRepository
from .user_repository import UserRepository

__all__ = [
    "CommentRepository",
    "RoleRepository",
    "UserOptionRepository",
    "UserRepository",
]

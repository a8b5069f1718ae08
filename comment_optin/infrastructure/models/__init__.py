"""ORM models used by the application infrastructure."""

from .comment import CommentModel
from .role import RoleModel
from .user import UserModel
from .user_option import UserOptionModel

__all__ = [
    "CommentModel",
    "RoleModel",
    "UserModel",
    "UserOptionModel",
]

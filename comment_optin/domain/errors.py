"""Errors raised by the opt-in notification features."""


class PreferenceStoreUnavailable(RuntimeError):
    """The per-user option storage could not be read or written."""


class CommentNotFoundError(LookupError):
    """A recipient hook was invoked for a comment that does not exist."""

    def __init__(self, comment_id: int) -> None:
        super().__init__(f"Comment with id {comment_id} not found")
        self.comment_id = comment_id


__all__ = ["CommentNotFoundError", "PreferenceStoreUnavailable"]

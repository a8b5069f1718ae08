"""Named filter chains used to extend the notification pipeline."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

COMMENT_NOTIFICATION_RECIPIENTS = "comment_notification_recipients"
COMMENT_MODERATION_RECIPIENTS = "comment_moderation_recipients"
HAS_CAP_HOOK = "optin_comment_notifications_has_cap"

FilterCallback = Callable[..., Any]


class HookRegistry:
    """Keep filter callbacks grouped by hook name.

    Callbacks for a hook run in the order they were added. Each one receives
    the value returned by the previous callback followed by the extra
    arguments given to :meth:`apply_filters`.
    """

    def __init__(self) -> None:
        self._filters: DefaultDict[str, List[FilterCallback]] = defaultdict(list)

    def add_filter(self, name: str, callback: FilterCallback) -> None:
        """Append ``callback`` to the chain for ``name``."""

        self._filters[name].append(callback)

    def remove_filter(self, name: str, callback: FilterCallback) -> bool:
        """Remove ``callback`` from ``name``; return ``False`` if it was not registered."""

        callbacks = self._filters.get(name)
        if not callbacks or callback not in callbacks:
            return False
        callbacks.remove(callback)
        if not callbacks:
            self._filters.pop(name, None)
        return True

    def callbacks(self, name: str) -> list[FilterCallback]:
        """Return a copy of the callbacks registered for ``name``."""

        return list(self._filters.get(name, []))

    def has_filter(self, name: str, callback: FilterCallback | None = None) -> bool:
        callbacks = self._filters.get(name, [])
        if callback is None:
            return bool(callbacks)
        return callback in callbacks

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Run ``value`` through every callback registered for ``name``."""

        for callback in list(self._filters.get(name, [])):
            value = callback(value, *args)
        return value

    def clear(self, name: str | None = None) -> None:
        if name is None:
            self._filters.clear()
        else:
            self._filters.pop(name, None)


hooks = HookRegistry()


__all__ = [
    "COMMENT_MODERATION_RECIPIENTS",
    "COMMENT_NOTIFICATION_RECIPIENTS",
    "HAS_CAP_HOOK",
    "FilterCallback",
    "HookRegistry",
    "hooks",
]

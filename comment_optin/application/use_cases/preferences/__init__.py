"""Use cases for the all-comments opt-in preference."""

from .binder import PreferenceControl, handle_save, render_control
from .store import PreferenceStore, save_preference

__all__ = [
    "PreferenceControl",
    "PreferenceStore",
    "handle_save",
    "render_control",
    "save_preference",
]

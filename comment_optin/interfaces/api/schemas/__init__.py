from .preference import PreferenceControlRead, PreferenceRead

__all__ = [
    "PreferenceControlRead",
    "PreferenceRead",
]

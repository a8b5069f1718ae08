"""Pydantic models describing the comment opt-in settings payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PreferenceControlRead(BaseModel):
    """Checkbox rendered on the user settings page."""

    name: str = Field(..., description="Form field name to submit")
    value: str = Field(..., description="Value submitted when the box is checked")
    checked: bool
    label: str
    description: str

    model_config = ConfigDict(from_attributes=True)


class PreferenceRead(BaseModel):
    """Stored opt-in state for a user."""

    user_id: int
    opted_in: bool


__all__ = ["PreferenceControlRead", "PreferenceRead"]

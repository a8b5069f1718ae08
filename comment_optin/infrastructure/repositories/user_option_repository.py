"""Persistence helpers for per-user option values."""

from __future__ import annotations

from sqlalchemy.orm import Session

from comment_optin.infrastructure.models import UserOptionModel


class UserOptionRepository:
    """Read, write and clear named options stored for a user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int, option_name: str) -> str | None:
        model = self._get_model(user_id, option_name)
        return model.option_value if model else None

    def set(self, user_id: int, option_name: str, value: str) -> None:
        model = self._get_model(user_id, option_name)
        if model is None:
            model = UserOptionModel(user_id=user_id, option_name=option_name)
        model.option_value = value
        self.session.add(model)
        self.session.commit()

    def delete(self, user_id: int, option_name: str) -> bool:
        """Remove the option, returning ``True`` when a row was deleted."""

        deleted = (
            self.session.query(UserOptionModel)
            .filter(UserOptionModel.user_id == user_id)
            .filter(UserOptionModel.option_name == option_name)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return bool(deleted)

    def _get_model(self, user_id: int, option_name: str) -> UserOptionModel | None:
        return (
            self.session.query(UserOptionModel)
            .filter_by(user_id=user_id, option_name=option_name)
            .first()
        )


__all__ = ["UserOptionRepository"]

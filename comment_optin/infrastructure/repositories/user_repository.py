"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, joinedload

from comment_optin.domain.entities import User
from comment_optin.infrastructure.models import UserModel, UserOptionModel

from .role_repository import RoleRepository


class UserRepository:
    """Provide read and create operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def list_by_option(self, option_name: str, option_value: str) -> Sequence[User]:
        """Return every user whose option ``option_name`` equals ``option_value``."""

        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .join(UserOptionModel, UserOptionModel.user_id == UserModel.id)
            .filter(UserOptionModel.option_name == option_name)
            .filter(UserOptionModel.option_value == option_value)
            .order_by(UserModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, user: User) -> User:
        model = UserModel(
            role_id=user.role.id,
            name=user.name,
            email=user.email,
        )
        if user.created_at is not None:
            model.created_at = user.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, **filters) -> UserModel | None:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        return query.filter_by(**filters).first()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        if model.role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return User(
            id=model.id,
            role=RoleRepository._to_entity(model.role),
            name=model.name,
            email=model.email,
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]

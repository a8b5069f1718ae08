"""Persistence layer for roles data."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from comment_optin.domain.entities import Role
from comment_optin.infrastructure.models import RoleModel


class RoleRepository:
    """Provide access to roles stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_alias(self, alias: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.alias) == alias.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, role: Role) -> Role:
        model = RoleModel(
            name=role.name,
            alias=role.alias,
            capabilities=list(role.capabilities),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            name=model.name,
            alias=model.alias,
            capabilities=tuple(model.capabilities or ()),
        )


__all__ = ["RoleRepository"]

"""SQLAlchemy model for user roles."""

from sqlalchemy import JSON, Column, Integer, String

from comment_optin.infrastructure.database import Base


class RoleModel(Base):
    """Database representation of the site roles."""

    __tablename__ = "role"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, unique=True)
    alias = Column(String(50), nullable=False, unique=True)
    capabilities = Column(JSON, nullable=False, default=list)


__all__ = ["RoleModel"]

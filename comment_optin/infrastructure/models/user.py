"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from comment_optin.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a site user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(Integer, ForeignKey("role.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(120), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    role = relationship("RoleModel", lazy="joined")
    options = relationship(
        "UserOptionModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["UserModel"]

"""SQLAlchemy model for per-user option values."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from comment_optin.infrastructure.database import Base


class UserOptionModel(Base):
    """A single named option stored for a user.

    Rows only exist for options that are set; an absent row means the
    option was never saved or has been cleared.
    """

    __tablename__ = "user_option"
    __table_args__ = (
        UniqueConstraint("user_id", "option_name", name="uq_user_option_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    option_name = Column(String(191), nullable=False, index=True)
    option_value = Column(String(255), nullable=False)

    user = relationship("UserModel", back_populates="options")


__all__ = ["UserOptionModel"]

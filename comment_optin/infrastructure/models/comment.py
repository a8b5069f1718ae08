"""SQLAlchemy model for comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from comment_optin.infrastructure.database import Base


class CommentModel(Base):
    """Database representation of a comment left on the site."""

    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    author_name = Column(String(120), nullable=False, default="")
    author_email = Column(String(120), nullable=True)
    content = Column(Text, nullable=False)
    approved = Column(String(20), nullable=False, default="1", index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["CommentModel"]

"""SQLAlchemy models for posts and replies."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from jobhub.infrastructure.database import Base


class PostModel(Base):
    """Database representation for community posts."""

    __tablename__ = "post"

    id = Column(String(32), primary_key=True)
    author_id = Column(String(128), nullable=False, index=True)
    author_name = Column(String(120), nullable=False)
    category = Column(String(20), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, index=True)
    edited_at = Column(DateTime(), nullable=True)
    reply_count = Column(Integer, nullable=False, default=0)


class ReplyModel(Base):
    """Database representation for replies.

    ``post_id`` is a plain back-reference without a foreign key: replies outlive
    a deleted parent post.
    """

    __tablename__ = "reply"

    id = Column(String(32), primary_key=True)
    post_id = Column(String(32), nullable=False, index=True)
    content = Column(Text, nullable=False)
    author_id = Column(String(128), nullable=False)
    author_name = Column(String(120), nullable=False)
    created_at = Column(DateTime(), nullable=False, index=True)


__all__ = ["PostModel", "ReplyModel"]

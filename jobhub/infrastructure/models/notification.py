"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, String, Text

from jobhub.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(String(32), primary_key=True)
    recipient_id = Column(String(128), nullable=False, index=True)
    kind = Column(String(20), nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, index=True)


__all__ = ["NotificationModel"]

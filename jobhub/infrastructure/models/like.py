"""Association table holding the members of ``likes`` set fields."""

from sqlalchemy import Column, String

from jobhub.infrastructure.database import Base


class LikeModel(Base):
    """One ``(collection, document, user)`` membership.

    The composite primary key makes set-add and set-remove single-row atomic
    operations, so concurrent likes never need a read-modify-write.
    """

    __tablename__ = "document_like"

    collection = Column(String(30), primary_key=True)
    document_id = Column(String(32), primary_key=True)
    user_id = Column(String(128), primary_key=True)


__all__ = ["LikeModel"]

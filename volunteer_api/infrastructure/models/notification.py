"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import new_identifier, now_utc_naive


class NotificationModel(Base):
    """Database representation for notifications and their event snapshot."""

    __tablename__ = "notification"

    id = Column(String(36), primary_key=True, default=new_identifier)
    title = Column(String(120), nullable=False)
    event_id = Column(
        String(36),
        ForeignKey("event.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    event_name = Column(String(120), nullable=True)
    event_description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    event_date = Column(DateTime, nullable=True)
    user_id = Column(
        String(36),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive, index=True)


__all__ = ["NotificationModel"]

"""SQLAlchemy model for events."""

from sqlalchemy import JSON, Column, DateTime, String, Text
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import new_identifier, now_utc_naive


class EventModel(Base):
    """Database representation of an event that needs volunteers."""

    __tablename__ = "event"

    id = Column(String(36), primary_key=True, default=new_identifier)
    event_name = Column(String(120), nullable=False)
    event_description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    required_skills = Column(JSON, nullable=False, default=list)
    urgency = Column(String(10), nullable=False)
    event_date = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc_naive)

    matches = relationship(
        "MatchModel",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["EventModel"]

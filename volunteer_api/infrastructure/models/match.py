"""SQLAlchemy model for volunteer assignments."""

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import new_identifier, now_utc_naive


class MatchModel(Base):
    """Database representation of a user assigned to an event."""

    __tablename__ = "match"
    __table_args__ = (
        UniqueConstraint("user_id", "event_id", name="uq_match_user_event"),
    )

    id = Column(String(36), primary_key=True, default=new_identifier)
    user_id = Column(
        String(36),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event_id = Column(
        String(36),
        ForeignKey("event.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    matched_on = Column(DateTime, nullable=False, default=now_utc_naive)

    user = relationship("UserModel", back_populates="matches", lazy="joined")
    event = relationship("EventModel", back_populates="matches", lazy="joined")


__all__ = ["MatchModel"]

"""SQLAlchemy model for volunteer profiles."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import new_identifier, now_utc_naive


class ProfileModel(Base):
    """Database representation of a volunteer profile."""

    __tablename__ = "profile"

    id = Column(String(36), primary_key=True, default=new_identifier)
    user_id = Column(
        String(36),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    full_name = Column(String(50), nullable=False, default="")
    address1 = Column(String(100), nullable=False, default="")
    address2 = Column(String(100), nullable=False, default="")
    city = Column(String(100), nullable=False, default="")
    state = Column(String(2), nullable=False, default="")
    zip = Column(String(9), nullable=False, default="")
    skills = Column(JSON, nullable=False, default=list)
    preferences = Column(Text, nullable=False, default="")
    # ISO-8601 UTC timestamps, in the order the volunteer entered them.
    availability = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc_naive)

    user = relationship("UserModel", back_populates="profile", lazy="joined")


__all__ = ["ProfileModel"]

"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import new_identifier, now_utc_naive


class UserModel(Base):
    """Database representation of a system user."""

    __tablename__ = "user"

    id = Column(String(36), primary_key=True, default=new_identifier)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="volunteer")
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)

    profile = relationship(
        "ProfileModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    matches = relationship(
        "MatchModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["UserModel"]

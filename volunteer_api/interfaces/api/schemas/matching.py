"""Schemas for matching and assignment requests."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from volunteer_api.domain.entities import Urgency

from .notification import NotificationRead


class MatchRequest(BaseModel):
    event_id: Any = Field(default=None, validation_alias=AliasChoices("event_id", "eventId"))


class AssignmentRequest(BaseModel):
    """Assign or unassign one or several volunteers.

    ``event_id`` and ``user_id`` are validated by the use cases so malformed
    values produce a 400. ``user_id`` may be a single identifier, a list of
    identifiers or omitted.
    """

    event_id: Any = Field(default=None, validation_alias=AliasChoices("event_id", "eventId"))
    user_id: Any = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    action: Any = None


class MatchRead(BaseModel):
    id: str
    user_id: str
    event_id: str
    matched_on: datetime

    model_config = ConfigDict(from_attributes=True)


class AssignmentResponse(BaseModel):
    message: str
    new_matches: list[MatchRead] | None = None
    deleted_count: int | None = None
    notifications: list[NotificationRead] | None = None


class MatchSummaryRead(BaseModel):
    user_name: str
    user_email: str
    event_name: str
    event_date: datetime | str
    event_location: str

    model_config = ConfigDict(from_attributes=True)


class MatchedUserRead(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class MatchedEventRead(BaseModel):
    id: str
    event_name: str
    event_date: datetime

    model_config = ConfigDict(from_attributes=True)


class MatchDetailRead(MatchRead):
    user: MatchedUserRead | None = None
    event: MatchedEventRead | None = None


class HistoryEntryRead(BaseModel):
    event_id: str
    event_name: str
    event_description: str
    location: str
    required_skills: list[str]
    urgency: Urgency
    event_date: datetime | None
    matched_on: datetime | None

    model_config = ConfigDict(from_attributes=True)

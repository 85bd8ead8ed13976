"""Schemas for events."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from volunteer_api.domain.entities import Urgency


class EventCreate(BaseModel):
    event_name: str = Field(
        ..., max_length=120, validation_alias=AliasChoices("event_name", "eventName")
    )
    event_description: str = Field(
        ..., validation_alias=AliasChoices("event_description", "eventDescription")
    )
    location: str = Field(..., max_length=255)
    required_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("required_skills", "requiredSkills"),
    )
    urgency: Urgency
    event_date: datetime = Field(
        ..., validation_alias=AliasChoices("event_date", "eventDate")
    )

    model_config = ConfigDict(extra="forbid")


class EventUpdate(BaseModel):
    event_name: str | None = Field(
        default=None, max_length=120, validation_alias=AliasChoices("event_name", "eventName")
    )
    event_description: str | None = Field(
        default=None, validation_alias=AliasChoices("event_description", "eventDescription")
    )
    location: str | None = Field(default=None, max_length=255)
    required_skills: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("required_skills", "requiredSkills")
    )
    urgency: Urgency | None = None
    event_date: datetime | None = Field(
        default=None, validation_alias=AliasChoices("event_date", "eventDate")
    )

    model_config = ConfigDict(extra="forbid")


class EventRead(BaseModel):
    id: str
    event_name: str
    event_description: str
    location: str
    required_skills: list[str]
    urgency: Urgency
    event_date: datetime
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str

"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used to announce an existing event."""

    event_id: str = Field(..., validation_alias=AliasChoices("event_id", "eventId"))
    notif_type: str = Field(
        ...,
        validation_alias=AliasChoices("notif_type", "notifType"),
        description="One of 'new event', 'updated event' or 'matched event'",
    )


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    title: str
    event_id: str | None = None
    event_name: str | None = None
    event_description: str | None = None
    location: str | None = None
    event_date: datetime | None = None
    user_id: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


__all__ = ["NotificationCreate", "NotificationRead"]

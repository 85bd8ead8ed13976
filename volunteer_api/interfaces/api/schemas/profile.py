"""Schemas for volunteer profiles."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .user import UserSummaryRead


class ProfileUpsert(BaseModel):
    """Full replacement of the profile owned by ``user_id``."""

    user_id: str = Field(..., validation_alias=AliasChoices("user_id", "userId"))
    full_name: str | None = Field(
        default=None, max_length=50, validation_alias=AliasChoices("full_name", "fullName")
    )
    address1: str | None = Field(default=None, max_length=100)
    address2: str | None = Field(default=None, max_length=100)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=2)
    zip: str | None = Field(default=None, max_length=9)
    skills: list[str] = Field(default_factory=list)
    preferences: str | None = None
    availability: list[datetime] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class ProfileRead(BaseModel):
    id: str
    user_id: str
    full_name: str
    address1: str
    address2: str
    city: str
    state: str
    zip: str
    skills: list[str]
    preferences: str
    availability: list[datetime]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: UserSummaryRead | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfileUpsertResponse(BaseModel):
    message: str
    profile: ProfileRead


class ProfileWithRoleRead(BaseModel):
    profile: ProfileRead
    role: str

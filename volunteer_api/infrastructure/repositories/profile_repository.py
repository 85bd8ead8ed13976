"""Persistence helpers for volunteer profiles."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from volunteer_api.domain.entities import Profile
from volunteer_api.infrastructure.models import ProfileModel
from volunteer_api.utils import ensure_app_timezone, ensure_utc, parse_datetime

from .user_repository import UserRepository


class ProfileRepository:
    """Provide CRUD operations for :class:`Profile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_with_users(self) -> Sequence[Profile]:
        """Return every profile with its user, in insertion order."""

        query = (
            self.session.query(ProfileModel)
            .options(joinedload(ProfileModel.user))
            .order_by(ProfileModel.created_at, ProfileModel.id)
        )
        return [self._to_entity(model, include_user=True) for model in query.all()]

    def get_by_user(self, user_id: str) -> Profile | None:
        model = (
            self.session.query(ProfileModel)
            .filter(ProfileModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, profile: Profile) -> Profile:
        model = ProfileModel(user_id=profile.user_id)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, profile: Profile) -> Profile:
        model = (
            self.session.query(ProfileModel)
            .filter(ProfileModel.user_id == profile.user_id)
            .first()
        )
        if model is None:
            msg = f"Profile for user {profile.user_id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _serialize_availability(values: Sequence[datetime]) -> list[str]:
        return [ensure_utc(value).isoformat() for value in values]

    @staticmethod
    def _apply_entity_to_model(model: ProfileModel, profile: Profile) -> None:
        model.full_name = profile.full_name or ""
        model.address1 = profile.address1 or ""
        model.address2 = profile.address2 or ""
        model.city = profile.city or ""
        model.state = profile.state or ""
        model.zip = profile.zip or ""
        model.skills = list(profile.skills or [])
        model.preferences = profile.preferences or ""
        model.availability = ProfileRepository._serialize_availability(
            profile.availability or []
        )

    @staticmethod
    def _to_entity(model: ProfileModel, *, include_user: bool = False) -> Profile:
        return Profile(
            id=model.id,
            user_id=model.user_id,
            full_name=model.full_name or "",
            address1=model.address1 or "",
            address2=model.address2 or "",
            city=model.city or "",
            state=model.state or "",
            zip=model.zip or "",
            skills=list(model.skills or []),
            preferences=model.preferences or "",
            availability=[
                ensure_app_timezone(parse_datetime(value))
                for value in model.availability or []
            ],
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            user=(
                UserRepository._to_entity(model.user)
                if include_user and model.user is not None
                else None
            ),
        )


__all__ = ["ProfileRepository"]

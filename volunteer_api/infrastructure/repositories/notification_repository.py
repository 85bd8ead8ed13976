"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Notification
from volunteer_api.infrastructure.models import NotificationModel
from volunteer_api.utils import ensure_app_timezone, ensure_utc_naive_datetime


class NotificationRepository:
    """Provide create and read operations for :class:`Notification` objects.

    Notifications are immutable once stored, so there is no update method.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        user_id: str | None = None,
        limit: int | None = None,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        if user_id is not None:
            query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def bulk_create(self, notifications: Sequence[Notification]) -> list[Notification]:
        if not notifications:
            return []
        models = []
        for notification in notifications:
            model = NotificationModel()
            self._apply_entity_to_model(model, notification)
            models.append(model)
        self.session.add_all(models)
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.title = notification.title
        model.event_id = notification.event_id
        model.event_name = notification.event_name
        model.event_description = notification.event_description
        model.location = notification.location
        model.event_date = ensure_utc_naive_datetime(notification.event_date)
        model.user_id = notification.user_id
        if notification.created_at is not None:
            model.created_at = ensure_utc_naive_datetime(notification.created_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            title=model.title,
            event_id=model.event_id,
            event_name=model.event_name,
            event_description=model.event_description,
            location=model.location,
            event_date=ensure_app_timezone(model.event_date),
            user_id=model.user_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]

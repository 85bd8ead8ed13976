"""Persistence helpers for events."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event, Urgency
from volunteer_api.infrastructure.models import EventModel
from volunteer_api.utils import ensure_app_timezone, ensure_utc_naive_datetime


class EventRepository:
    """Provide CRUD operations for :class:`Event` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Event]:
        query = self.session.query(EventModel).order_by(
            EventModel.event_date, EventModel.id
        )
        return [self._to_entity(model) for model in query.all()]

    def list_between(self, start: datetime, end: datetime) -> Sequence[Event]:
        """Return events whose date falls within ``start`` and ``end`` inclusive."""

        query = (
            self.session.query(EventModel)
            .filter(EventModel.event_date >= ensure_utc_naive_datetime(start))
            .filter(EventModel.event_date <= ensure_utc_naive_datetime(end))
            .order_by(EventModel.event_date, EventModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, event_id: str) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel()
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, event: Event) -> Event:
        model = self.session.get(EventModel, event.id)
        if model is None:
            msg = f"Event with id {event.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, event_id: str) -> None:
        model = self.session.get(EventModel, event_id)
        if model is None:
            msg = f"Event with id {event_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.event_name = event.event_name
        model.event_description = event.event_description
        model.location = event.location
        model.required_skills = list(event.required_skills or [])
        model.urgency = Urgency(event.urgency).value
        model.event_date = ensure_utc_naive_datetime(event.event_date)

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            event_name=model.event_name,
            event_description=model.event_description,
            location=model.location,
            required_skills=list(model.required_skills or []),
            urgency=Urgency(model.urgency),
            event_date=ensure_app_timezone(model.event_date),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["EventRepository"]

"""Persistence helpers for volunteer assignments."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Match
from volunteer_api.infrastructure.models import MatchModel
from volunteer_api.utils import ensure_app_timezone, ensure_utc_naive_datetime

from .event_repository import EventRepository
from .user_repository import UserRepository

logger = logging.getLogger(__name__)


class MatchRepository:
    """Provide CRUD operations for :class:`Match` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, include_related: bool = False) -> Sequence[Match]:
        query = self.session.query(MatchModel).order_by(
            MatchModel.matched_on, MatchModel.id
        )
        return [
            self._to_entity(model, include_related=include_related)
            for model in query.all()
        ]

    def list_by_user(self, user_id: str) -> Sequence[Match]:
        query = (
            self.session.query(MatchModel)
            .filter(MatchModel.user_id == user_id)
            .order_by(MatchModel.matched_on, MatchModel.id)
        )
        return [self._to_entity(model, include_related=True) for model in query.all()]

    def list_by_event(
        self, event_id: str, *, user_ids: Iterable[str] | None = None
    ) -> Sequence[Match]:
        query = self.session.query(MatchModel).filter(MatchModel.event_id == event_id)
        if user_ids is not None:
            query = query.filter(MatchModel.user_id.in_(list(user_ids)))
        query = query.order_by(MatchModel.matched_on, MatchModel.id)
        return [self._to_entity(model) for model in query.all()]

    def bulk_create(self, matches: Sequence[Match]) -> list[Match]:
        """Insert ``matches`` and return the ones the database accepted.

        Rows rejected by the ``(user_id, event_id)`` unique constraint are
        skipped, so a concurrent assignment of the same pair is reported as
        already assigned instead of failing the whole batch.
        """

        if not matches:
            return []
        models = [self._new_model(match) for match in matches]
        self.session.add_all(models)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.info(
                "Batch insert of %s matches hit the uniqueness constraint; retrying one by one",
                len(matches),
            )
            return self._create_each(matches)
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def bulk_delete(
        self, *, event_id: str, user_ids: Iterable[str] | None = None
    ) -> int:
        """Delete the matches of ``event_id`` and return how many were removed."""

        query = self.session.query(MatchModel).filter(MatchModel.event_id == event_id)
        if user_ids is not None:
            query = query.filter(MatchModel.user_id.in_(list(user_ids)))
        deleted = query.delete(synchronize_session=False)
        self.session.commit()
        return deleted

    def _create_each(self, matches: Sequence[Match]) -> list[Match]:
        created: list[Match] = []
        for match in matches:
            model = self._new_model(match)
            self.session.add(model)
            try:
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                logger.info(
                    "User %s is already assigned to event %s", match.user_id, match.event_id
                )
                continue
            self.session.refresh(model)
            created.append(self._to_entity(model))
        return created

    @staticmethod
    def _new_model(match: Match) -> MatchModel:
        model = MatchModel(user_id=match.user_id, event_id=match.event_id)
        if match.matched_on is not None:
            model.matched_on = ensure_utc_naive_datetime(match.matched_on)
        return model

    @staticmethod
    def _to_entity(model: MatchModel, *, include_related: bool = False) -> Match:
        return Match(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            matched_on=ensure_app_timezone(model.matched_on),
            user=(
                UserRepository._to_entity(model.user)
                if include_related and model.user is not None
                else None
            ),
            event=(
                EventRepository._to_entity(model.event)
                if include_related and model.event is not None
                else None
            ),
        )


__all__ = ["MatchRepository"]

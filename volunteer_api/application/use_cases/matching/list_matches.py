"""Use cases for reading existing volunteer assignments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Match
from volunteer_api.infrastructure.repositories import MatchRepository

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class MatchSummary:
    """Flattened view of a match for staff dashboards."""

    user_name: str
    user_email: str
    event_name: str
    event_date: datetime | str
    event_location: str


def list_matches(session: Session) -> Sequence[Match]:
    """Return every match with its user and event loaded."""

    return MatchRepository(session).list(include_related=True)


def list_match_summaries(session: Session) -> list[MatchSummary]:
    """Return every match flattened, using ``N/A`` for missing references."""

    return [_summarize(match) for match in list_matches(session)]


def list_volunteer_details(session: Session) -> list[MatchSummary]:
    """Return flattened matches whose user and event both still exist."""

    return [
        _summarize(match)
        for match in list_matches(session)
        if match.user is not None and match.event is not None
    ]


def _summarize(match: Match) -> MatchSummary:
    user = match.user
    event = match.event
    return MatchSummary(
        user_name=user.name if user else NOT_AVAILABLE,
        user_email=user.email if user else NOT_AVAILABLE,
        event_name=event.event_name if event else NOT_AVAILABLE,
        event_date=event.event_date if event and event.event_date else NOT_AVAILABLE,
        event_location=event.location if event else NOT_AVAILABLE,
    )


__all__ = [
    "MatchSummary",
    "list_match_summaries",
    "list_matches",
    "list_volunteer_details",
]

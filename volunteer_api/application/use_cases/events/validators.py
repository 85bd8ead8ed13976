"""Common validation helpers for event use cases."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from volunteer_api.domain.entities import SKILLS, Urgency
from volunteer_api.domain.errors import InvalidArgumentError
from volunteer_api.utils import is_valid_identifier, parse_datetime


def ensure_event_identifier(event_id: str) -> str:
    if not is_valid_identifier(event_id):
        raise InvalidArgumentError("Invalid eventId format.")
    return event_id


def ensure_text(value: str | None, *, field_name: str) -> str:
    """Return ``value`` stripped, rejecting blank strings."""

    normalized = (value or "").strip()
    if not normalized:
        raise InvalidArgumentError(f"{field_name} is required.")
    return normalized


def ensure_skills(skills: Iterable[str] | None) -> list[str]:
    """Return ``skills`` without repetitions, rejecting unknown skill names."""

    unique = list(dict.fromkeys(skills or []))
    unknown = [skill for skill in unique if skill not in SKILLS]
    if unknown:
        raise InvalidArgumentError(f"Unknown skills: {', '.join(unknown)}")
    return unique


def ensure_urgency(value: Urgency | str) -> Urgency:
    try:
        return Urgency(value)
    except ValueError as exc:
        raise InvalidArgumentError("Urgency must be Low, Medium or High.") from exc


def ensure_event_date(value: datetime | date | str | None) -> datetime:
    if value is None:
        raise InvalidArgumentError("eventDate is required.")
    try:
        return parse_datetime(value)
    except ValueError as exc:
        raise InvalidArgumentError("Invalid eventDate.") from exc


__all__ = [
    "ensure_event_date",
    "ensure_event_identifier",
    "ensure_skills",
    "ensure_text",
    "ensure_urgency",
]

"""Common validation helpers for profile use cases."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from volunteer_api.domain.entities import US_STATES
from volunteer_api.domain.errors import InvalidArgumentError
from volunteer_api.utils import parse_datetime

FIELD_LIMITS = {
    "full_name": 50,
    "address1": 100,
    "address2": 100,
    "city": 100,
    "zip": 9,
}


def ensure_length(value: str | None, *, field_name: str) -> str:
    normalized = (value or "").strip()
    limit = FIELD_LIMITS[field_name]
    if len(normalized) > limit:
        raise InvalidArgumentError(f"{field_name} must be at most {limit} characters")
    return normalized


def ensure_state(value: str | None) -> str:
    normalized = (value or "").strip().upper()
    if normalized not in US_STATES:
        raise InvalidArgumentError("state must be a two-letter US state code")
    return normalized


def parse_availability(values: Iterable[datetime | date | str] | None) -> list[datetime]:
    """Convert availability entries into datetimes, keeping their order."""

    parsed: list[datetime] = []
    for value in values or []:
        try:
            parsed.append(parse_datetime(value))
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid availability date: {value}") from exc
    return parsed

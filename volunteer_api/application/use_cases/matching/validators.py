"""Common validation helpers for matching use cases."""

from __future__ import annotations

from collections.abc import Iterable

from volunteer_api.domain.errors import InvalidArgumentError
from volunteer_api.utils import is_valid_identifier


def ensure_event_id(event_id: object) -> str:
    """Return ``event_id`` or raise when it is missing or malformed."""

    if not event_id:
        raise InvalidArgumentError("eventId is required.")
    if not is_valid_identifier(event_id):
        raise InvalidArgumentError("Invalid eventId format.")
    return event_id


def ensure_user_ids(user_ids: Iterable[str]) -> list[str]:
    """Return ``user_ids`` without repetitions, validating each identifier."""

    unique = list(dict.fromkeys(user_ids))
    for user_id in unique:
        if not is_valid_identifier(user_id):
            raise InvalidArgumentError(
                f"Invalid userId format: {user_id}", entity_id=str(user_id)
            )
    return unique


def coerce_user_ids(value: object) -> list[str]:
    """Accept a single identifier, a list of identifiers or nothing at all."""

    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return list(value)
    raise InvalidArgumentError(
        "userId must be a string, an array of strings, or omitted."
    )


__all__ = ["coerce_user_ids", "ensure_event_id", "ensure_user_ids"]

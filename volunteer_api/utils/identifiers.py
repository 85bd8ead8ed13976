"""Helpers for the opaque string identifiers used by every table."""

from __future__ import annotations

import uuid


def new_identifier() -> str:
    """Return a fresh identifier in canonical UUID text form."""

    return str(uuid.uuid4())


def is_valid_identifier(value: object) -> bool:
    """Return ``True`` when ``value`` is a string the database could have issued."""

    if not isinstance(value, str) or not value:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


__all__ = ["is_valid_identifier", "new_identifier"]

"""Canonical comparison keys for availability and event dates."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable

from volunteer_api.domain.errors import InvalidArgumentError
from volunteer_api.utils import get_app_timezone, parse_datetime


def normalize_availability_date(value: datetime | date | str) -> datetime:
    """Return the comparison key for ``value``.

    The instant is expressed in the application timezone, moved forward one
    calendar day and truncated to midnight. Event dates and availability
    entries must both go through the same shift before they are compared.
    Applying the function twice shifts the date twice, so every raw value
    must be normalized exactly once.
    """

    try:
        instant = parse_datetime(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid date value: {value!r}") from exc

    tz = get_app_timezone()
    local_day = instant.astimezone(tz).date() + timedelta(days=1)
    return datetime.combine(local_day, time.min, tzinfo=tz)


def normalize_availability(values: Iterable[datetime | date | str] | None) -> list[datetime]:
    """Normalize every entry of an availability list, keeping its order."""

    return [normalize_availability_date(value) for value in values or ()]


__all__ = ["normalize_availability", "normalize_availability_date"]

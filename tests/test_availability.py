"""Tests for the availability date normalizer (APP_TIMEZONE=UTC+02:00)."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from volunteer_api.domain.availability import (
    normalize_availability,
    normalize_availability_date,
)
from volunteer_api.domain.errors import InvalidArgumentError

PLUS_TWO = timezone(timedelta(hours=2))


def test_late_utc_evening_moves_two_calendar_days() -> None:
    result = normalize_availability_date("2024-10-19T23:00:00Z")

    assert result == datetime(2024, 10, 21, tzinfo=PLUS_TWO)
    assert result.utcoffset() == timedelta(hours=2)
    assert (result.hour, result.minute, result.second, result.microsecond) == (0, 0, 0, 0)


@pytest.mark.parametrize(
    ("raw", "expected_day"),
    [
        ("2024-10-19T21:59:59Z", date(2024, 10, 20)),
        ("2024-10-19T22:00:00Z", date(2024, 10, 21)),
        ("2024-10-19T23:59:00+02:00", date(2024, 10, 20)),
    ],
)
def test_local_midnight_is_the_day_boundary(raw: str, expected_day: date) -> None:
    assert normalize_availability_date(raw).date() == expected_day


def test_date_only_values_are_utc_midnight() -> None:
    assert normalize_availability_date("2024-10-31").date() == date(2024, 11, 1)
    assert normalize_availability_date(date(2024, 10, 31)).date() == date(2024, 11, 1)


def test_naive_datetimes_are_treated_as_utc() -> None:
    naive = datetime(2024, 10, 19, 23, 0)
    aware = datetime(2024, 10, 19, 23, 0, tzinfo=timezone.utc)

    assert normalize_availability_date(naive) == normalize_availability_date(aware)


def test_normalizing_twice_shifts_twice() -> None:
    once = normalize_availability_date("2024-10-19T23:00:00Z")
    twice = normalize_availability_date(once)

    assert twice == once + timedelta(days=1)


def test_list_normalization_keeps_order() -> None:
    values = ["2024-11-03", "2024-11-01T10:00:00Z", None]

    with pytest.raises(InvalidArgumentError):
        normalize_availability(values)

    assert [value.day for value in normalize_availability(values[:2])] == [4, 2]
    assert normalize_availability(None) == []


@pytest.mark.parametrize("raw", ["", "not-a-date", "2024-13-01", 42])
def test_invalid_values_are_rejected(raw) -> None:
    with pytest.raises(InvalidArgumentError):
        normalize_availability_date(raw)

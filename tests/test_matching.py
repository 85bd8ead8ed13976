"""Tests for volunteer eligibility rules."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from conftest import COOKING, DRIVING, FIRST_AID, make_event, make_volunteer
from volunteer_api.application.use_cases.matching import filter_candidates, find_candidates
from volunteer_api.domain.entities import Event, Profile
from volunteer_api.domain.errors import InvalidArgumentError, NotFoundError
from volunteer_api.utils import new_identifier


def _event(skills, event_date) -> Event:
    return Event(
        id=new_identifier(),
        event_name="Food Drive",
        event_description="Sort donations",
        location="Houston",
        required_skills=list(skills),
        event_date=event_date,
    )


def _profile(skills, availability) -> Profile:
    return Profile(
        id=new_identifier(),
        user_id=new_identifier(),
        skills=list(skills),
        availability=list(availability),
    )


def test_candidate_needs_a_shared_skill_and_the_same_normalized_day() -> None:
    event = _event([FIRST_AID, DRIVING], datetime(2024, 10, 19, 23, 0, tzinfo=timezone.utc))
    fits = _profile([FIRST_AID, COOKING], ["2024-10-20"])
    wrong_skill = _profile([COOKING], ["2024-10-20"])
    wrong_day = _profile([DRIVING], ["2024-10-19"])
    no_availability = _profile([FIRST_AID], [])

    result = filter_candidates(event, [fits, wrong_skill, wrong_day, no_availability])

    assert result == [fits]


def test_event_without_required_skills_matches_nobody() -> None:
    event = _event([], datetime(2024, 11, 1, tzinfo=timezone.utc))
    profile = _profile([FIRST_AID], ["2024-11-01"])

    assert filter_candidates(event, [profile]) == []


def test_availability_on_previous_day_does_not_match() -> None:
    event = _event([FIRST_AID], "2024-11-01")
    previous_day = _profile([FIRST_AID], ["2024-10-31"])
    same_day = _profile([FIRST_AID], ["2024-11-01"])

    assert filter_candidates(event, [previous_day, same_day]) == [same_day]


def test_find_candidates_returns_profiles_with_their_user(session) -> None:
    event = make_event(session, skills=[FIRST_AID], event_date="2030-11-01")
    first = make_volunteer(
        session, name="Ana", email="ana@example.com", skills=[FIRST_AID], availability=["2030-11-01"]
    )
    make_volunteer(
        session, name="Bo", email="bo@example.com", skills=[COOKING], availability=["2030-11-01"]
    )
    second = make_volunteer(
        session,
        name="Cy",
        email="cy@example.com",
        skills=[FIRST_AID, DRIVING],
        availability=["2030-10-30", "2030-11-01"],
    )

    candidates = find_candidates(session, event_id=event.id)

    assert [profile.user_id for profile in candidates] == [first.id, second.id]
    assert candidates[0].user.email == "ana@example.com"


def test_find_candidates_validates_the_event(session) -> None:
    with pytest.raises(InvalidArgumentError):
        find_candidates(session, event_id=None)
    with pytest.raises(InvalidArgumentError):
        find_candidates(session, event_id="abc")
    with pytest.raises(NotFoundError):
        find_candidates(session, event_id=new_identifier())

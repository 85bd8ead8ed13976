"""Tests for assigning and unassigning volunteers."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import SQLAlchemyError

from conftest import make_event, make_user
from volunteer_api.application.use_cases.matching import (
    ALREADY_ASSIGNED_MESSAGE,
    NO_MATCHES_MESSAGE,
    assign_volunteers,
    unassign_volunteers,
)
from volunteer_api.application.use_cases.notifications import (
    TITLE_MATCHED,
    TITLE_UNASSIGNED,
    list_notifications,
)
from volunteer_api.config import get_settings
from volunteer_api.domain.entities import Match
from volunteer_api.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ProcessingError,
)
from volunteer_api.infrastructure.repositories import (
    EventRepository,
    MatchRepository,
    NotificationRepository,
)
from volunteer_api.utils import new_identifier


@pytest.fixture()
def volunteers(session):
    return [
        make_user(session, name=f"Volunteer {index}", email=f"v{index}@example.com")
        for index in range(3)
    ]


@pytest.fixture()
def event(session):
    return make_event(session)


def _titles_for(session, user_id: str) -> list[str]:
    return [notification.title for notification in list_notifications(session, user_id=user_id)]


def test_assign_creates_matches_and_notifies_each_user(session, event, volunteers) -> None:
    ids = [volunteers[0].id, volunteers[1].id]

    created = assign_volunteers(session, event_id=event.id, user_ids=ids)

    assert sorted(match.user_id for match in created) == sorted(ids)
    assert all(match.event_id == event.id and match.id for match in created)
    assert _titles_for(session, volunteers[0].id) == [TITLE_MATCHED]
    assert _titles_for(session, volunteers[2].id) == []


def test_assign_skips_users_already_assigned(session, event, volunteers) -> None:
    assign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    created = assign_volunteers(
        session, event_id=event.id, user_ids=[volunteers[0].id, volunteers[1].id]
    )

    assert [match.user_id for match in created] == [volunteers[1].id]
    assert _titles_for(session, volunteers[0].id) == [TITLE_MATCHED]
    assert len(MatchRepository(session).list_by_event(event.id)) == 2


def test_assign_rejects_when_everyone_is_already_assigned(session, event, volunteers) -> None:
    assign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    with pytest.raises(ConflictError) as exc_info:
        assign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    assert exc_info.value.message == ALREADY_ASSIGNED_MESSAGE


def test_assign_deduplicates_requested_users(session, event, volunteers) -> None:
    created = assign_volunteers(
        session, event_id=event.id, user_ids=[volunteers[0].id, volunteers[0].id]
    )

    assert len(created) == 1


@pytest.mark.parametrize(
    ("event_id", "user_ids", "error"),
    [
        (None, ["x"], InvalidArgumentError),
        ("not-a-uuid", ["x"], InvalidArgumentError),
        ("EVENT", [], InvalidArgumentError),
        ("EVENT", ["bad id"], InvalidArgumentError),
        ("EVENT", ["MISSING"], NotFoundError),
        ("MISSING", ["USER"], NotFoundError),
    ],
)
def test_assign_validation_errors(session, event, volunteers, event_id, user_ids, error) -> None:
    substitutions = {"EVENT": event.id, "USER": volunteers[0].id, "MISSING": new_identifier()}
    event_id = substitutions.get(event_id, event_id)
    user_ids = [substitutions.get(user_id, user_id) for user_id in user_ids]

    with pytest.raises(error):
        assign_volunteers(session, event_id=event_id, user_ids=user_ids)

    assert MatchRepository(session).list() == []


def test_bulk_create_skips_pairs_inserted_concurrently(session, event, volunteers) -> None:
    repository = MatchRepository(session)
    repository.bulk_create([Match(id=None, user_id=volunteers[0].id, event_id=event.id)])

    created = repository.bulk_create(
        [
            Match(id=None, user_id=volunteers[0].id, event_id=event.id),
            Match(id=None, user_id=volunteers[1].id, event_id=event.id),
        ]
    )

    assert [match.user_id for match in created] == [volunteers[1].id]
    assert len(repository.list_by_event(event.id)) == 2


def test_unassign_selected_users_notifies_them(session, event, volunteers) -> None:
    assign_volunteers(session, event_id=event.id, user_ids=[user.id for user in volunteers])

    result = unassign_volunteers(session, event_id=event.id, user_ids=[volunteers[1].id])

    assert result.deleted_count == 1
    assert [notification.user_id for notification in result.notifications] == [volunteers[1].id]
    assert result.notifications[0].title == TITLE_UNASSIGNED
    assert result.notifications[0].event_name == event.event_name
    remaining = {match.user_id for match in MatchRepository(session).list_by_event(event.id)}
    assert remaining == {volunteers[0].id, volunteers[2].id}


def test_unassign_twice_reports_nothing_to_remove(session, event, volunteers) -> None:
    assign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])
    unassign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    with pytest.raises(NotFoundError) as exc_info:
        unassign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    assert exc_info.value.message == NO_MATCHES_MESSAGE


def test_unassign_all_clears_event_without_notifications(session, event, volunteers) -> None:
    assign_volunteers(session, event_id=event.id, user_ids=[user.id for user in volunteers])

    result = unassign_volunteers(session, event_id=event.id, user_ids=[])

    assert result.deleted_count == 3
    assert result.notifications == []
    assert MatchRepository(session).list_by_event(event.id) == []
    assert all(TITLE_UNASSIGNED not in _titles_for(session, user.id) for user in volunteers)

    with pytest.raises(NotFoundError):
        unassign_volunteers(session, event_id=event.id)


def test_unassign_all_can_notify_every_volunteer(monkeypatch, session, event, volunteers) -> None:
    assign_volunteers(session, event_id=event.id, user_ids=[user.id for user in volunteers])
    monkeypatch.setenv("NOTIFY_ON_UNASSIGN_ALL", "true")
    get_settings.cache_clear()
    try:
        result = unassign_volunteers(session, event_id=event.id)
    finally:
        monkeypatch.delenv("NOTIFY_ON_UNASSIGN_ALL")
        get_settings.cache_clear()

    assert result.deleted_count == 3
    assert sorted(n.user_id for n in result.notifications) == sorted(u.id for u in volunteers)


def _raise_database_error(*args, **kwargs):
    raise SQLAlchemyError("database unavailable")


def test_failed_match_write_is_a_processing_error(monkeypatch, session, event, volunteers) -> None:
    monkeypatch.setattr(MatchRepository, "bulk_create", _raise_database_error)

    with pytest.raises(ProcessingError) as exc_info:
        assign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    assert exc_info.value.message == "Error processing request."
    assert _titles_for(session, volunteers[0].id) == []


def test_failed_notifications_keep_committed_matches(
    monkeypatch, session, event, volunteers
) -> None:
    monkeypatch.setattr(NotificationRepository, "bulk_create", _raise_database_error)

    with pytest.raises(ProcessingError):
        assign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    matches = MatchRepository(session).list_by_event(event.id)
    assert [match.user_id for match in matches] == [volunteers[0].id]
    assert _titles_for(session, volunteers[0].id) == []


def test_unassign_reports_event_removed_after_delete(
    monkeypatch, session, event, volunteers
) -> None:
    assign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])
    monkeypatch.setattr(EventRepository, "get", lambda self, event_id: None)

    with pytest.raises(NotFoundError) as exc_info:
        unassign_volunteers(session, event_id=event.id, user_ids=[volunteers[0].id])

    assert exc_info.value.message == "Event not found."
    assert MatchRepository(session).list_by_event(event.id) == []
    assert TITLE_UNASSIGNED not in _titles_for(session, volunteers[0].id)

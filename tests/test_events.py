"""Tests for event lifecycle notifications and the reminder sweep."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_event, make_user
from volunteer_api.application.use_cases.events import delete_event, get_event, update_event
from volunteer_api.application.use_cases.history import list_volunteer_history
from volunteer_api.application.use_cases.matching import assign_volunteers
from volunteer_api.application.use_cases.notifications import (
    TITLE_CANCELED_EVENT,
    TITLE_NEW_EVENT,
    TITLE_UPCOMING_EVENT,
    TITLE_UPDATED_EVENT,
    create_event_notification,
    list_notifications,
    send_upcoming_event_reminders,
)
from volunteer_api.domain.errors import InvalidArgumentError, NotFoundError
from volunteer_api.infrastructure.repositories import MatchRepository
from volunteer_api.utils import new_identifier


def test_creating_an_event_announces_it(session) -> None:
    event = make_event(session, name="Beach Cleanup")

    [notification] = list_notifications(session)

    assert notification.title == TITLE_NEW_EVENT
    assert notification.event_id == event.id
    assert notification.event_name == "Beach Cleanup"
    assert notification.user_id is None


def test_event_validation(session) -> None:
    with pytest.raises(InvalidArgumentError):
        make_event(session, skills=["Juggling"])
    with pytest.raises(InvalidArgumentError):
        make_event(session, urgency="Urgent")
    with pytest.raises(InvalidArgumentError):
        make_event(session, event_name="   ")
    with pytest.raises(NotFoundError):
        get_event(session, new_identifier())


def test_updates_do_not_rewrite_earlier_notifications(session) -> None:
    event = make_event(session, name="Food Drive")

    updated = update_event(session, event_id=event.id, event_name="Winter Food Drive")

    assert updated.event_name == "Winter Food Drive"
    assert updated.location == event.location
    latest, original = list_notifications(session)
    assert latest.title == TITLE_UPDATED_EVENT
    assert latest.event_name == "Winter Food Drive"
    assert original.title == TITLE_NEW_EVENT
    assert original.event_name == "Food Drive"


def test_deleting_an_event_removes_its_matches(session) -> None:
    event = make_event(session, name="Shelter Night")
    other = make_event(session, name="Park Day")
    user = make_user(session, name="Ana", email="ana@example.com")
    assign_volunteers(session, event_id=event.id, user_ids=[user.id])
    assign_volunteers(session, event_id=other.id, user_ids=[user.id])

    delete_event(session, event.id)

    assert MatchRepository(session).list_by_event(event.id) == []
    assert [entry.event_name for entry in list_volunteer_history(session, user_id=user.id)] == [
        "Park Day"
    ]
    canceled = list_notifications(session)[0]
    assert canceled.title == TITLE_CANCELED_EVENT
    assert canceled.event_id is None
    assert canceled.event_name == "Shelter Night"
    with pytest.raises(NotFoundError):
        get_event(session, event.id)


def test_history_requires_a_user_id(session) -> None:
    with pytest.raises(InvalidArgumentError):
        list_volunteer_history(session, user_id=None)
    assert list_volunteer_history(session, user_id=new_identifier()) == []


def test_manual_notification_types(session) -> None:
    event = make_event(session)

    notification = create_event_notification(session, event_id=event.id, notif_type="Updated Event")

    assert notification.title == TITLE_UPDATED_EVENT
    with pytest.raises(InvalidArgumentError):
        create_event_notification(session, event_id=event.id, notif_type="party")
    with pytest.raises(NotFoundError):
        create_event_notification(session, event_id=new_identifier(), notif_type="new event")


def test_reminders_cover_events_inside_the_window(session) -> None:
    make_event(session, name="Tomorrow", event_date="2030-11-01T12:00:00Z")
    make_event(session, name="Next Week", event_date="2030-11-08T12:00:00Z")
    make_event(session, name="Yesterday", event_date="2030-10-30T12:00:00Z")
    now = datetime(2030, 10, 31, 18, 0, tzinfo=timezone.utc)

    sent = send_upcoming_event_reminders(session, now=now, window=timedelta(hours=24))

    assert sent == 1
    reminders = [n for n in list_notifications(session) if n.title == TITLE_UPCOMING_EVENT]
    assert [reminder.event_name for reminder in reminders] == ["Tomorrow"]

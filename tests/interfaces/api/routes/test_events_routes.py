"""Tests for the event endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from conftest import FIRST_AID, auth_headers_for, make_user
from volunteer_api.utils import new_identifier

EVENT_PAYLOAD = {
    "eventName": "Food Drive",
    "eventDescription": "Sort and pack donations",
    "location": "Houston, TX",
    "requiredSkills": [FIRST_AID],
    "urgency": "Medium",
    "eventDate": "2030-11-01T15:00:00Z",
}


def test_event_crud(client: TestClient, admin_headers) -> None:
    created = client.post("/events/", json=EVENT_PAYLOAD, headers=admin_headers)
    assert created.status_code == 201
    event_id = created.json()["id"]
    assert created.json()["urgency"] == "Medium"

    listed = client.get("/events/", headers=admin_headers)
    assert [event["id"] for event in listed.json()] == [event_id]

    updated = client.put(
        f"/events/{event_id}", json={"location": "Austin, TX"}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json()["location"] == "Austin, TX"
    assert updated.json()["event_name"] == "Food Drive"

    deleted = client.delete(f"/events/{event_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get(f"/events/{event_id}", headers=admin_headers).status_code == 404

    titles = [n["title"] for n in client.get("/notifications/", headers=admin_headers).json()]
    assert titles == [
        "An Event Has Been Canceled",
        "An Event Has Been Updated",
        "A New Event Has Been Posted!",
    ]


def test_event_validation_errors(client: TestClient, admin_headers) -> None:
    bad_skill = {**EVENT_PAYLOAD, "requiredSkills": ["Juggling"]}
    assert client.post("/events/", json=bad_skill, headers=admin_headers).status_code == 400

    bad_urgency = {**EVENT_PAYLOAD, "urgency": "Critical"}
    assert client.post("/events/", json=bad_urgency, headers=admin_headers).status_code == 422

    assert client.get("/events/abc", headers=admin_headers).status_code == 400
    assert client.get(f"/events/{new_identifier()}", headers=admin_headers).status_code == 404


def test_only_staff_can_publish(client: TestClient, session) -> None:
    volunteer = make_user(session, name="Ana", email="ana@example.com")

    response = client.post("/events/", json=EVENT_PAYLOAD, headers=auth_headers_for(volunteer))

    assert response.status_code == 403

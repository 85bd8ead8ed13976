"""Tests for registration and token endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


def _register(client: TestClient, email: str = "ana@example.com"):
    return client.post(
        "/auth/register",
        json={"name": "Ana", "email": email, "password": "Secret123"},
    )


def test_register_returns_token_and_creates_empty_profile(client: TestClient) -> None:
    response = _register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["role"] == "volunteer"
    assert body["token_type"] == "bearer"

    headers = {"Authorization": f"Bearer {body['access_token']}"}
    profile_response = client.get(f"/profiles/{body['user_id']}", headers=headers)
    assert profile_response.status_code == 200
    assert profile_response.json()["skills"] == []


def test_register_rejects_duplicate_email(client: TestClient) -> None:
    _register(client)

    response = _register(client, email="ANA@example.com")

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already in use"


def test_login_and_me(client: TestClient) -> None:
    _register(client)

    token_response = client.post(
        "/auth/token", data={"username": "ana@example.com", "password": "Secret123"}
    )
    assert token_response.status_code == 200
    token = token_response.json()["access_token"]

    me_response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me_response.status_code == 200
    assert me_response.json()["email"] == "ana@example.com"


def test_login_with_wrong_password(client: TestClient) -> None:
    _register(client)

    response = client.post(
        "/auth/token", data={"username": "ana@example.com", "password": "wrong-pass"}
    )

    assert response.status_code == 401


def test_protected_routes_require_a_token(client: TestClient) -> None:
    assert client.get("/events/").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer nope"}).status_code == 401

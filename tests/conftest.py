"""Shared fixtures for the volunteer matching test-suite."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "volunteer_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC+02:00"
os.environ["NOTIFY_ON_UNASSIGN_ALL"] = "false"

from volunteer_api.config import get_settings  # noqa: E402

get_settings.cache_clear()

from volunteer_api.application.use_cases.events import create_event  # noqa: E402
from volunteer_api.application.use_cases.profiles import upsert_profile  # noqa: E402
from volunteer_api.application.use_cases.users import create_user  # noqa: E402
from volunteer_api.domain.entities import ROLE_ADMIN, ROLE_VOLUNTEER  # noqa: E402
from volunteer_api.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from volunteer_api.infrastructure.security import create_access_token  # noqa: E402
from volunteer_api.utils import get_app_timezone  # noqa: E402

get_app_timezone.cache_clear()

FIRST_AID = "First Aid & CPR"
COOKING = "Food Preparation & Serving"
DRIVING = "Transportation & Driving"


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from an empty schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


def make_user(session, *, name: str, email: str, role: str = ROLE_VOLUNTEER, password: str = "Secret123"):
    return create_user(session, name=name, email=email, password=password, role=role)


def make_volunteer(session, *, name: str, email: str, skills=(), availability=()):
    """Create a volunteer together with a profile."""

    user = make_user(session, name=name, email=email)
    upsert_profile(
        session,
        user_id=user.id,
        full_name=name,
        skills=list(skills),
        availability=list(availability),
    )
    return user


def make_event(session, *, name: str = "Food Drive", skills=(FIRST_AID,), event_date="2030-11-01T12:00:00Z", **overrides):
    values = {
        "event_name": name,
        "event_description": f"{name} description",
        "location": "Community Center",
        "required_skills": list(skills),
        "urgency": "High",
        "event_date": event_date,
    }
    values.update(overrides)
    return create_event(session, **values)


def auth_headers_for(user) -> dict[str, str]:
    token = create_access_token(data={"sub": user.id, "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin(session):
    return make_user(session, name="Staff", email="staff@example.com", role=ROLE_ADMIN)


@pytest.fixture()
def admin_headers(admin):
    return auth_headers_for(admin)

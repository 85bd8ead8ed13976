"""API route registrations."""

from fastapi import FastAPI

from .auth import router as auth_router
from .events import router as events_router
from .history import router as history_router
from .matching import router as matching_router
from .notifications import router as notifications_router
from .profiles import router as profiles_router


def register_routes(app: FastAPI) -> None:
    app.include_router(auth_router)
    app.include_router(profiles_router)
    app.include_router(events_router)
    app.include_router(matching_router)
    app.include_router(history_router)
    app.include_router(notifications_router)


__all__ = ["register_routes"]

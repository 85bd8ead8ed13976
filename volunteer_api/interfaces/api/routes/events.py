"""Endpoints for managing events."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.events import (
    create_event as create_event_uc,
    delete_event as delete_event_uc,
    get_event as get_event_uc,
    list_events as list_events_uc,
    update_event as update_event_uc,
)
from volunteer_api.domain.entities import Event, User
from volunteer_api.domain.errors import VolunteerMatchError
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import get_current_user, require_admin
from volunteer_api.interfaces.api.routes_helpers import to_http_exception
from volunteer_api.interfaces.api.schemas import (
    EventCreate,
    EventRead,
    EventUpdate,
    MessageResponse,
)

router = APIRouter(prefix="/events", tags=["events"])


def _to_read_model(event: Event) -> EventRead:
    return EventRead.model_validate(event)


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> EventRead:
    """Publish a new event and announce it to volunteers."""

    try:
        event = create_event_uc(db, **payload.model_dump())
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(event)


@router.get("/", response_model=list[EventRead])
def list_events(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[EventRead]:
    return [_to_read_model(event) for event in list_events_uc(db)]


@router.get("/{event_id}", response_model=EventRead)
def get_event(
    event_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> EventRead:
    try:
        event = get_event_uc(db, event_id)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(event)


@router.put("/{event_id}", response_model=EventRead)
def update_event(
    event_id: str,
    payload: EventUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> EventRead:
    """Edit an event; earlier notifications keep their original snapshot."""

    try:
        event = update_event_uc(db, event_id=event_id, **payload.model_dump(exclude_unset=True))
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(event)


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> MessageResponse:
    """Cancel an event, removing every volunteer assigned to it."""

    try:
        delete_event_uc(db, event_id)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Event deleted successfully")

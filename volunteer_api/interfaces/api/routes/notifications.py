"""Endpoints for reading and announcing notifications."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.notifications import (
    create_event_notification,
    list_notifications,
)
from volunteer_api.domain.entities import User
from volunteer_api.domain.errors import VolunteerMatchError
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import (
    ensure_self_or_admin,
    get_current_user,
    require_admin,
)
from volunteer_api.interfaces.api.routes_helpers import to_http_exception
from volunteer_api.interfaces.api.schemas import NotificationCreate, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationRead])
def read_notifications(
    user_id: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return notifications newest first.

    Volunteers only ever see their own notifications; staff may list every
    notification or filter by ``user_id``.
    """

    if user_id is None and not current_user.is_admin():
        user_id = current_user.id
    if user_id is not None:
        ensure_self_or_admin(current_user, user_id)

    try:
        notifications = list_notifications(db, user_id=user_id, limit=limit)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> NotificationRead:
    try:
        notification = create_event_notification(
            db, event_id=payload.event_id, notif_type=payload.notif_type
        )
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return NotificationRead.model_validate(notification)

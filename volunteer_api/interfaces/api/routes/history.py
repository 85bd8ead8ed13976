"""Endpoint exposing the participation history of a volunteer."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.history import list_volunteer_history
from volunteer_api.domain.entities import User
from volunteer_api.domain.errors import VolunteerMatchError
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import ensure_self_or_admin, get_current_user
from volunteer_api.interfaces.api.routes_helpers import to_http_exception
from volunteer_api.interfaces.api.schemas import HistoryEntryRead

router = APIRouter(prefix="/history", tags=["history"])


@router.get("/", response_model=list[HistoryEntryRead])
def read_history(
    user_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[HistoryEntryRead]:
    if user_id:
        ensure_self_or_admin(current_user, user_id)
    try:
        entries = list_volunteer_history(db, user_id=user_id)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return [HistoryEntryRead.model_validate(entry) for entry in entries]

"""Endpoints used by staff to match and assign volunteers."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.matching import (
    assign_volunteers,
    coerce_user_ids,
    find_candidates,
    list_match_summaries,
    list_matches,
    list_volunteer_details,
    unassign_volunteers,
)
from volunteer_api.domain.entities import User
from volunteer_api.domain.errors import VolunteerMatchError
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import require_admin
from volunteer_api.interfaces.api.routes_helpers import to_http_exception
from volunteer_api.interfaces.api.schemas import (
    AssignmentRequest,
    AssignmentResponse,
    MatchDetailRead,
    MatchRead,
    MatchRequest,
    MatchSummaryRead,
    NotificationRead,
    ProfileRead,
)

router = APIRouter(prefix="/matching", tags=["matching"])
logger = logging.getLogger(__name__)

ACTION_ASSIGN = "assign"
ACTION_UNASSIGN = "unassign"


@router.get("/all", response_model=list[MatchSummaryRead])
def list_all_matches(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[MatchSummaryRead]:
    return [MatchSummaryRead.model_validate(summary) for summary in list_match_summaries(db)]


@router.get("/volunteer-details", response_model=list[MatchSummaryRead])
def list_matched_volunteer_details(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[MatchSummaryRead]:
    """Like ``/all`` but skipping matches whose user or event is gone."""

    return [
        MatchSummaryRead.model_validate(summary) for summary in list_volunteer_details(db)
    ]


@router.get("/matched", response_model=list[MatchDetailRead])
def list_matched_volunteers(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[MatchDetailRead]:
    return [MatchDetailRead.model_validate(match) for match in list_matches(db)]


@router.post("/match", response_model=list[ProfileRead])
def match_volunteers(
    payload: MatchRequest,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[ProfileRead]:
    """Return the profiles eligible for the requested event."""

    try:
        profiles = find_candidates(db, event_id=payload.event_id)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return [ProfileRead.model_validate(profile) for profile in profiles]


@router.post("/assign", response_model=AssignmentResponse, response_model_exclude_none=True)
def assign_or_unassign(
    payload: AssignmentRequest,
    response: Response,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> AssignmentResponse:
    """Assign volunteers to an event or remove them from it.

    ``action`` must be ``assign`` or ``unassign``. Unassigning without
    ``user_id`` clears the whole event.
    """

    action = payload.action
    if action not in (ACTION_ASSIGN, ACTION_UNASSIGN):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid action. Use 'assign' or 'unassign'.",
        )

    try:
        user_ids = coerce_user_ids(payload.user_id)
        if action == ACTION_ASSIGN:
            created = assign_volunteers(db, event_id=payload.event_id, user_ids=user_ids)
            response.status_code = status.HTTP_201_CREATED
            return AssignmentResponse(
                message="Users assigned to event successfully.",
                new_matches=[MatchRead.model_validate(match) for match in created],
            )

        result = unassign_volunteers(db, event_id=payload.event_id, user_ids=user_ids)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc

    if user_ids:
        message = "Users unassigned from event successfully and notifications created."
    else:
        message = "All users unassigned from event successfully."
    return AssignmentResponse(
        message=message,
        deleted_count=result.deleted_count,
        notifications=[
            NotificationRead.model_validate(notification)
            for notification in result.notifications
        ],
    )

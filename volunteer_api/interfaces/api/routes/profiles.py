"""Endpoints for volunteer profiles."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.profiles import (
    get_profile as get_profile_uc,
    get_profile_with_role as get_profile_with_role_uc,
    upsert_profile as upsert_profile_uc,
)
from volunteer_api.domain.entities import User
from volunteer_api.domain.errors import VolunteerMatchError
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import ensure_self_or_admin, get_current_user
from volunteer_api.interfaces.api.routes_helpers import to_http_exception
from volunteer_api.interfaces.api.schemas import (
    ProfileRead,
    ProfileUpsert,
    ProfileUpsertResponse,
    ProfileWithRoleRead,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post("/", response_model=ProfileUpsertResponse)
def upsert_profile(
    payload: ProfileUpsert,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileUpsertResponse:
    """Create the profile of a user or replace its contents."""

    ensure_self_or_admin(current_user, payload.user_id)
    try:
        profile, created = upsert_profile_uc(db, **payload.model_dump())
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc

    if created:
        response.status_code = status.HTTP_201_CREATED
        message = "Profile created successfully"
    else:
        message = "Profile updated successfully"
    return ProfileUpsertResponse(message=message, profile=ProfileRead.model_validate(profile))


@router.get("/{user_id}", response_model=ProfileRead)
def get_profile(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    ensure_self_or_admin(current_user, user_id)
    try:
        profile = get_profile_uc(db, user_id)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return ProfileRead.model_validate(profile)


@router.get("/{user_id}/role", response_model=ProfileWithRoleRead)
def get_profile_with_role(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileWithRoleRead:
    """Return the profile together with the role of its owner."""

    ensure_self_or_admin(current_user, user_id)
    try:
        profile, role = get_profile_with_role_uc(db, user_id)
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc
    return ProfileWithRoleRead(profile=ProfileRead.model_validate(profile), role=role)

"""Endpoints for volunteer sign-up and authentication."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.users import (
    authenticate_user,
    register_volunteer,
)
from volunteer_api.domain.entities import User
from volunteer_api.domain.errors import VolunteerMatchError
from volunteer_api.infrastructure.database import get_db
from volunteer_api.infrastructure.security import create_access_token
from volunteer_api.interfaces.api.dependencies import get_current_user
from volunteer_api.interfaces.api.routes_helpers import to_http_exception
from volunteer_api.interfaces.api.schemas import (
    RegisterRequest,
    RegisterResponse,
    Token,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _issue_token(user: User) -> dict:
    access_token = create_access_token(data={"sub": user.id, "role": user.role})
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user_id": user.id,
        "user_name": user.name,
        "role": user.role,
    }


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> RegisterResponse:
    """Create a volunteer account with an empty profile and sign it in."""

    try:
        user = register_volunteer(
            db, name=payload.name, email=payload.email, password=payload.password
        )
    except VolunteerMatchError as exc:
        raise to_http_exception(exc) from exc

    return RegisterResponse(message="User registered successfully", **_issue_token(user))


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> Token:
    """Authenticate by email and password and return a JWT."""

    user = authenticate_user(db, form_data.username, form_data.password)
    if user is None:
        logger.info("Rejected login attempt for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(**_issue_token(user))


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    """Return the authenticated user."""

    return UserRead.model_validate(current_user)

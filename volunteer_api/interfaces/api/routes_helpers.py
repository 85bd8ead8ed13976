"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from volunteer_api.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ProcessingError,
    VolunteerMatchError,
)

_STATUS_BY_ERROR: tuple[tuple[type[VolunteerMatchError], int], ...] = (
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ProcessingError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(exc: VolunteerMatchError) -> int:
    """Return the HTTP status that represents ``exc`` for API clients."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(exc: VolunteerMatchError) -> HTTPException:
    """Translate a use case error into the ``HTTPException`` FastAPI returns."""

    return HTTPException(status_code=status_code_for(exc), detail=exc.message)

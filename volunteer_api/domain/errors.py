"""Errors raised by the matching and assignment use cases."""


class VolunteerMatchError(ValueError):
    """Base class for failures reported back to API callers."""

    def __init__(self, message: str, *, entity_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.entity_id = entity_id


class InvalidArgumentError(VolunteerMatchError):
    """Input is missing or malformed."""


class NotFoundError(VolunteerMatchError):
    """A referenced event, user, profile or match does not exist."""


class ConflictError(VolunteerMatchError):
    """The request would not change anything because it was already applied."""


class ProcessingError(VolunteerMatchError):
    """The persistence layer failed unexpectedly."""


__all__ = [
    "VolunteerMatchError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "ProcessingError",
]

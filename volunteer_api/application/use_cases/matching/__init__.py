"""Use cases for matching volunteers to events."""

from .assign_volunteers import ALREADY_ASSIGNED_MESSAGE, assign_volunteers
from .find_candidates import filter_candidates, find_candidates
from .list_matches import (
    MatchSummary,
    list_match_summaries,
    list_matches,
    list_volunteer_details,
)
from .unassign_volunteers import (
    NO_MATCHES_MESSAGE,
    UnassignmentResult,
    unassign_volunteers,
)
from .validators import coerce_user_ids

__all__ = [
    "ALREADY_ASSIGNED_MESSAGE",
    "NO_MATCHES_MESSAGE",
    "MatchSummary",
    "UnassignmentResult",
    "assign_volunteers",
    "coerce_user_ids",
    "filter_candidates",
    "find_candidates",
    "list_match_summaries",
    "list_matches",
    "list_volunteer_details",
    "unassign_volunteers",
]

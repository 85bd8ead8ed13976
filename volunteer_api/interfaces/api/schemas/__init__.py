from .auth import RegisterRequest, RegisterResponse, Token
from .event import EventCreate, EventRead, EventUpdate, MessageResponse
from .matching import (
    AssignmentRequest,
    AssignmentResponse,
    HistoryEntryRead,
    MatchDetailRead,
    MatchRead,
    MatchRequest,
    MatchSummaryRead,
)
from .notification import NotificationCreate, NotificationRead
from .profile import (
    ProfileRead,
    ProfileUpsert,
    ProfileUpsertResponse,
    ProfileWithRoleRead,
)
from .user import UserRead, UserSummaryRead

__all__ = [
    "AssignmentRequest",
    "AssignmentResponse",
    "EventCreate",
    "EventRead",
    "EventUpdate",
    "HistoryEntryRead",
    "MatchDetailRead",
    "MatchRead",
    "MatchRequest",
    "MatchSummaryRead",
    "MessageResponse",
    "NotificationCreate",
    "NotificationRead",
    "ProfileRead",
    "ProfileUpsert",
    "ProfileUpsertResponse",
    "ProfileWithRoleRead",
    "RegisterRequest",
    "RegisterResponse",
    "Token",
    "UserRead",
    "UserSummaryRead",
]

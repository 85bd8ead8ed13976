"""Event-related use cases."""

from .create_event import create_event
from .delete_event import delete_event
from .get_event import get_event
from .list_events import list_events
from .update_event import update_event

__all__ = [
    "create_event",
    "delete_event",
    "get_event",
    "list_events",
    "update_event",
]

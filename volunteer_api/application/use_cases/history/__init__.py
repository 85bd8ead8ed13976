"""Use cases for volunteer participation history."""

from .list_volunteer_history import HistoryEntry, list_volunteer_history

__all__ = ["HistoryEntry", "list_volunteer_history"]

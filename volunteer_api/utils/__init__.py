"""Utility helpers for reusable functionality."""

from .identifiers import is_valid_identifier, new_identifier
from .datetime import (
    ensure_app_timezone,
    ensure_utc,
    ensure_utc_naive_datetime,
    get_app_timezone,
    now_in_app_timezone,
    now_utc_naive,
    parse_datetime,
)

__all__ = [
    "is_valid_identifier",
    "new_identifier",
    "ensure_app_timezone",
    "ensure_utc",
    "ensure_utc_naive_datetime",
    "get_app_timezone",
    "now_in_app_timezone",
    "now_utc_naive",
    "parse_datetime",
]

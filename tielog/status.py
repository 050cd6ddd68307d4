"""Outcome codes reported by link and network operations."""

from __future__ import annotations

from enum import Enum


class NetworkStatus(Enum):
    """Outcome of a network operation"""

    SUCCESS = "success"
    ALREADY_VALID = "already_valid"  # Link pair was assigned before
    INVALID_USERS = "invalid_users"  # Unknown, duplicate or wrong number of users
    INVALID_DATE = "invalid_date"  # Date precedes the last event on record
    ALREADY_ACTIVE = "already_active"
    ALREADY_INACTIVE = "already_inactive"
    INVALID_DISTANCE = "invalid_distance"  # Negative maximum hop distance

    @property
    def ok(self) -> bool:
        return self is NetworkStatus.SUCCESS

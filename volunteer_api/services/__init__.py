"""Services package."""

from volunteer_api.services.matching_store import DuplicateMatchError, MatchingStore
from volunteer_api.services.notification_store import NotificationStore

__all__ = ["DuplicateMatchError", "MatchingStore", "NotificationStore"]

"""In-memory notification store."""

import itertools
import logging
import threading
from datetime import datetime, timezone

from volunteer_api.schemas.notification import Notification, RecipientType

logger = logging.getLogger(__name__)


class NotificationStore:
    """Holds notifications newest-first and answers role/recipient-scoped queries.

    Every operation runs under a single lock, so a request never observes a
    partially applied mutation. Records handed back to callers are copies.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._notifications: list[Notification] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(
        self,
        recipient_type: RecipientType | str,
        recipient_id: int | None,
        message: str,
    ) -> Notification:
        """
        Create an unread notification and put it at the front of the store.

        Args:
            recipient_type: Inbox role ("admin" or "volunteer")
            recipient_id: Specific recipient, or None to broadcast to the role
            message: Notification text

        Returns:
            The created notification

        Raises:
            ValueError: If recipient_type is not a known role
        """
        recipient_type = RecipientType(recipient_type)
        with self._lock:
            notification = Notification(
                id=next(self._ids),
                recipient_type=recipient_type,
                recipient_id=recipient_id,
                message=message,
                read=False,
                timestamp=datetime.now(timezone.utc),
            )
            self._notifications.insert(0, notification)
        logger.debug(
            "Created notification %s for %s %s",
            notification.id,
            notification.recipient_type.value,
            recipient_id if recipient_id is not None else "(broadcast)",
        )
        return notification.model_copy()

    def list(
        self,
        recipient_type: RecipientType | str,
        recipient_id: int | None = None,
        unread_only: bool = False,
    ) -> list[Notification]:
        """
        Return notifications for a role, newest first.

        When ``recipient_id`` is None every notification of the role is
        returned, whatever its own recipient.
        """
        with self._lock:
            return [
                notification.model_copy()
                for notification in self._notifications
                if notification.recipient_type == recipient_type
                and (recipient_id is None or notification.recipient_id == recipient_id)
                and not (unread_only and notification.read)
            ]

    def count_unread(
        self,
        recipient_type: RecipientType | str,
        recipient_id: int | None = None,
    ) -> int:
        """Count unread notifications using the same scoping as :meth:`list`."""
        return len(self.list(recipient_type, recipient_id, unread_only=True))

    def mark_read(self, notification_id: int) -> Notification | None:
        """Mark a notification as read. Returns None when it does not exist."""
        with self._lock:
            for notification in self._notifications:
                if notification.id == notification_id:
                    notification.read = True
                    return notification.model_copy()
        return None

    def delete(self, notification_id: int) -> bool:
        """Remove a notification. Returns whether anything was removed."""
        with self._lock:
            before = len(self._notifications)
            self._notifications = [
                notification
                for notification in self._notifications
                if notification.id != notification_id
            ]
            deleted = len(self._notifications) != before
        if deleted:
            logger.debug("Deleted notification %s", notification_id)
        return deleted

    def __len__(self) -> int:
        with self._lock:
            return len(self._notifications)

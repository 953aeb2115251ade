"""Notification schemas for request/response validation."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from volunteer_api.schemas.common import CamelModel


class RecipientType(str, Enum):
    """Role-level inbox a notification belongs to."""

    ADMIN = "admin"
    VOLUNTEER = "volunteer"


class NotificationCreate(CamelModel):
    """Schema for creating a new notification."""

    recipient_type: RecipientType = Field(..., description="Inbox role (admin or volunteer)")
    recipient_id: int | None = Field(
        None, description="Specific recipient; omit to broadcast to the whole role"
    )
    message: str = Field(..., min_length=1, max_length=1000, description="Notification text")


class Notification(CamelModel):
    """Stored notification record."""

    id: int = Field(..., description="Unique notification identifier")
    recipient_type: RecipientType
    recipient_id: int | None = None
    message: str
    read: bool = False
    timestamp: datetime = Field(..., description="Creation instant (UTC)")


class NotificationResponse(CamelModel):
    """Envelope for a single notification."""

    success: bool = True
    data: Notification


class NotificationListResponse(CamelModel):
    """Envelope for a list of notifications."""

    success: bool = True
    count: int
    data: list[Notification]


class UnreadCountResponse(CamelModel):
    """Envelope carrying a recipient's unread notification count."""

    success: bool = True
    unread_count: int

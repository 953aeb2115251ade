"""Notification routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from volunteer_api.api.dependencies import get_notification_store
from volunteer_api.schemas import (
    MessageResponse,
    NotificationCreate,
    NotificationListResponse,
    NotificationResponse,
    RecipientType,
    UnreadCountResponse,
)
from volunteer_api.services import NotificationStore

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
def get_notifications(
    role: str | None = Query(None, description="Inbox role"),
    recipient_id: str | None = Query(None, alias="id", description="Specific recipient"),
    unread_only: bool = Query(False, alias="unreadOnly"),
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationListResponse:
    """
    List notifications for a role, newest first.

    An absent or unknown role, or an id that is not an integer, matches nothing.
    """
    if role is None:
        return NotificationListResponse(count=0, data=[])

    if recipient_id is not None:
        try:
            recipient_id = int(recipient_id)
        except ValueError:
            return NotificationListResponse(count=0, data=[])

    data = store.list(role, recipient_id, unread_only)
    return NotificationListResponse(count=len(data), data=data)


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationResponse:
    """Create a new notification."""
    notification = store.create(payload.recipient_type, payload.recipient_id, payload.message)
    return NotificationResponse(data=notification)


@router.get("/volunteer/{volunteer_id}", response_model=NotificationListResponse)
def get_volunteer_notifications(
    volunteer_id: int,
    unread_only: bool = Query(False, alias="unreadOnly"),
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationListResponse:
    """List the notifications addressed to one volunteer."""
    data = store.list(RecipientType.VOLUNTEER, volunteer_id, unread_only)
    return NotificationListResponse(count=len(data), data=data)


@router.get("/volunteer/{volunteer_id}/unread-count", response_model=UnreadCountResponse)
def get_volunteer_unread_count(
    volunteer_id: int,
    store: NotificationStore = Depends(get_notification_store),
) -> UnreadCountResponse:
    """Count a volunteer's unread notifications."""
    return UnreadCountResponse(
        unread_count=store.count_unread(RecipientType.VOLUNTEER, volunteer_id)
    )


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: int,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationResponse:
    """Mark a notification as read."""
    notification = store.mark_read(notification_id)
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return NotificationResponse(data=notification)


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: int,
    store: NotificationStore = Depends(get_notification_store),
) -> MessageResponse:
    """Delete a notification."""
    if not store.delete(notification_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return MessageResponse(message="Deleted successfully")

"""Pydantic schemas for records, requests and response envelopes."""

from volunteer_api.schemas.common import CamelModel, MessageResponse
from volunteer_api.schemas.match import Match, MatchListResponse, MatchRequest, MatchResponse
from volunteer_api.schemas.notification import (
    Notification,
    NotificationCreate,
    NotificationListResponse,
    NotificationResponse,
    RecipientType,
    UnreadCountResponse,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    "Match",
    "MatchListResponse",
    "MatchRequest",
    "MatchResponse",
    "Notification",
    "NotificationCreate",
    "NotificationListResponse",
    "NotificationResponse",
    "RecipientType",
    "UnreadCountResponse",
]

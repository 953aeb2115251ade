"""Request dependencies handing out the application's stores."""

from fastapi import Request

from volunteer_api.core.config import Settings
from volunteer_api.services import MatchingStore, NotificationStore


def get_notification_store(request: Request) -> NotificationStore:
    return request.app.state.notification_store


def get_matching_store(request: Request) -> MatchingStore:
    return request.app.state.matching_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

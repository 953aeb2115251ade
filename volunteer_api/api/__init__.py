"""API routes package."""

from fastapi import APIRouter

from volunteer_api.api.routes import matching, notifications

api_router = APIRouter()

api_router.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])
api_router.include_router(matching.router, prefix="/matching", tags=["Matching"])

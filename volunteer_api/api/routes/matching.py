"""Volunteer-event matching routes."""

from fastapi import APIRouter, Body, Depends, HTTPException, status

from volunteer_api.api.dependencies import (
    get_app_settings,
    get_matching_store,
    get_notification_store,
)
from volunteer_api.core.config import Settings
from volunteer_api.schemas import (
    MatchListResponse,
    MatchRequest,
    MatchResponse,
    MessageResponse,
    RecipientType,
)
from volunteer_api.services import DuplicateMatchError, MatchingStore, NotificationStore

router = APIRouter()


@router.post("", response_model=MatchResponse, status_code=status.HTTP_201_CREATED)
def create_match(
    payload: MatchRequest,
    store: MatchingStore = Depends(get_matching_store),
    notifications: NotificationStore = Depends(get_notification_store),
    settings: Settings = Depends(get_app_settings),
) -> MatchResponse:
    """Assign a volunteer to an event."""
    try:
        match = store.create(payload.volunteer_id, payload.event_id)
    except DuplicateMatchError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    if settings.NOTIFY_ON_MATCH:
        notifications.create(
            RecipientType.VOLUNTEER,
            match.volunteer_id,
            f"You have been matched to event {match.event_id}.",
        )

    return MatchResponse(message="Volunteer successfully matched to event.", data=match)


@router.get("", response_model=MatchListResponse)
def get_all_matches(store: MatchingStore = Depends(get_matching_store)) -> MatchListResponse:
    """Return all volunteer-event matches."""
    data = store.list_all()
    return MatchListResponse(count=len(data), data=data)


@router.get("/{volunteer_id}", response_model=MatchListResponse)
def get_matches_for_volunteer(
    volunteer_id: int,
    store: MatchingStore = Depends(get_matching_store),
) -> MatchListResponse:
    """Return the matches of one volunteer."""
    data = store.list_by_volunteer(volunteer_id)
    return MatchListResponse(count=len(data), data=data)


@router.delete("", response_model=MessageResponse)
def delete_match(
    payload: MatchRequest = Body(...),
    store: MatchingStore = Depends(get_matching_store),
    notifications: NotificationStore = Depends(get_notification_store),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    """Remove every match between a volunteer and an event."""
    if not store.delete(payload.volunteer_id, payload.event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Match not found")

    if settings.NOTIFY_ON_MATCH:
        notifications.create(
            RecipientType.VOLUNTEER,
            payload.volunteer_id,
            f"You have been removed from event {payload.event_id}.",
        )

    return MessageResponse(message="Volunteer-event match deleted.")

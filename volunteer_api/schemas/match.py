"""Volunteer-event match schemas."""

from datetime import date

from pydantic import Field

from volunteer_api.schemas.common import CamelModel


class MatchRequest(CamelModel):
    """Volunteer/event pair sent to create or remove a match."""

    volunteer_id: int = Field(..., description="Volunteer being assigned")
    event_id: int = Field(..., description="Event the volunteer is assigned to")


class Match(CamelModel):
    """Assignment of a volunteer to an event."""

    volunteer_id: int
    event_id: int
    date_matched: date


class MatchResponse(CamelModel):
    """Envelope returned when a match is created."""

    success: bool = True
    message: str
    data: Match


class MatchListResponse(CamelModel):
    """Envelope for a list of matches."""

    success: bool = True
    count: int
    data: list[Match]

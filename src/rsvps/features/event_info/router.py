from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import Field

from src.rsvps.deadline import EventConfig, build_event_info
from src.rsvps.dependencies import Clock, get_clock, get_event_config
from src.rsvps.schemas import CamelModel
from src.rsvps.urls import RSVP_EVENT_INFO_URL

router = APIRouter()


class EventInfo(CamelModel):
    event_name: str
    event_date: datetime
    event_location: str
    rsvp_deadline: datetime
    is_deadline_passed: bool
    can_still_rsvp: bool = Field(alias="canStillRSVP")
    days_until_deadline: int
    days_until_event: int


class EventInfoResponse(CamelModel):
    message: str
    event_info: EventInfo


@router.get(RSVP_EVENT_INFO_URL, response_model=EventInfoResponse)
async def get_event_info(
    event: EventConfig = Depends(get_event_config),
    clock: Clock = Depends(get_clock),
) -> EventInfoResponse:
    """Event details and whether RSVPs are still open."""
    info = build_event_info(event, clock())
    return EventInfoResponse(
        message="Event information retrieved successfully",
        event_info=EventInfo(
            event_name=info.event_name,
            event_date=info.event_date,
            event_location=info.event_location,
            rsvp_deadline=info.rsvp_deadline,
            is_deadline_passed=info.is_deadline_passed,
            can_still_rsvp=info.can_still_rsvp,
            days_until_deadline=info.days_until_deadline,
            days_until_event=info.days_until_event,
        ),
    )

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status

from src.rsvps.deadline import EventConfig, ensure_rsvp_open
from src.rsvps.dependencies import Clock, get_clock, get_event_config, get_rsvp_write_model
from src.rsvps.errors import update_link_for
from src.rsvps.repository.write_models import RsvpWriteModel
from src.rsvps.schemas import CamelModel, RsvpResponse
from src.rsvps.urls import RSVP_URL
from src.rsvps.validation import validate_rsvp

logger = logging.getLogger(__name__)

router = APIRouter()


class CreateRsvpResponse(CamelModel):
    message: str
    rsvp: RsvpResponse
    update_link: str


@router.post(RSVP_URL, response_model=CreateRsvpResponse, status_code=status.HTTP_201_CREATED)
async def create_rsvp(
    request: Request,
    payload: dict[str, Any] = Body(...),
    write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
    event: EventConfig = Depends(get_event_config),
    clock: Clock = Depends(get_clock),
) -> CreateRsvpResponse:
    """
    Submit a new RSVP.
    Closed once the RSVP deadline has passed. A second submission for the same
    email is rejected with a pointer to the existing RSVP's update link.
    """
    ensure_rsvp_open(event, clock(), "New RSVPs are no longer accepted.")
    fields = validate_rsvp(payload)
    rsvp = await write_model.create_rsvp(fields)

    return CreateRsvpResponse(
        message="RSVP submitted successfully! Save your update link.",
        rsvp=RsvpResponse.from_dto(rsvp),
        update_link=update_link_for(request, rsvp.update_token),
    )

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends

from src.rsvps.deadline import EventConfig, ensure_rsvp_open
from src.rsvps.dependencies import (
    Clock,
    get_clock,
    get_event_config,
    get_rsvp_read_model,
    get_rsvp_write_model,
)
from src.rsvps.errors import RsvpNotFoundError
from src.rsvps.repository.read_models import RsvpReadModel
from src.rsvps.repository.write_models import RsvpWriteModel
from src.rsvps.schemas import RsvpDetailResponse, RsvpResponse
from src.rsvps.urls import RSVP_BY_ID_URL, RSVP_BY_TOKEN_URL
from src.rsvps.validation import apply_attending_defaults, validate_rsvp

router = APIRouter()


@router.put(RSVP_BY_TOKEN_URL, response_model=RsvpDetailResponse)
async def update_rsvp_by_token(
    token: str,
    payload: dict[str, Any] = Body(...),
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
    write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
    event: EventConfig = Depends(get_event_config),
    clock: Clock = Depends(get_clock),
) -> RsvpDetailResponse:
    """
    Let a guest change their own RSVP through the update link.
    Only allowed until the RSVP deadline. Switching from not attending to
    attending without head counts records one guest and no children.
    """
    ensure_rsvp_open(event, clock(), "Updates are no longer allowed.")

    existing = await read_model.get_rsvp_by_token(token)
    if not existing:
        raise RsvpNotFoundError("RSVP not found or invalid update link.")

    changes = apply_attending_defaults(existing.attending, payload)
    fields = validate_rsvp({**existing.as_payload(), **changes})
    rsvp = await write_model.update_rsvp(existing.id, fields)

    return RsvpDetailResponse(
        message="RSVP updated successfully!",
        rsvp=RsvpResponse.from_dto(rsvp),
    )


@router.put(RSVP_BY_ID_URL, response_model=RsvpDetailResponse)
async def update_rsvp_by_id(
    rsvp_id: UUID,
    payload: dict[str, Any] = Body(...),
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
    write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
) -> RsvpDetailResponse:
    """Admin update. Not subject to the RSVP deadline."""
    existing = await read_model.get_rsvp_by_id(rsvp_id)
    if not existing:
        raise RsvpNotFoundError("RSVP not found. It may have been deleted.")

    fields = validate_rsvp({**existing.as_payload(), **payload})
    rsvp = await write_model.update_rsvp(existing.id, fields)

    return RsvpDetailResponse(
        message="RSVP updated successfully!",
        rsvp=RsvpResponse.from_dto(rsvp),
    )

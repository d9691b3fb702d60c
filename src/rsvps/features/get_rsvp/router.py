from uuid import UUID

from fastapi import APIRouter, Depends

from src.rsvps.dependencies import get_rsvp_read_model
from src.rsvps.errors import RsvpNotFoundError
from src.rsvps.repository.read_models import RsvpReadModel
from src.rsvps.schemas import RsvpDetailResponse, RsvpResponse
from src.rsvps.urls import RSVP_BY_ID_URL, RSVP_BY_TOKEN_ROUTE, RSVP_BY_TOKEN_URL

router = APIRouter()


@router.get(RSVP_BY_TOKEN_URL, response_model=RsvpDetailResponse, name=RSVP_BY_TOKEN_ROUTE)
async def get_rsvp_by_token(
    token: str,
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> RsvpDetailResponse:
    """
    Get an RSVP through its update link.
    This is the page a guest lands on before changing their answer.
    """
    rsvp = await read_model.get_rsvp_by_token(token)
    if not rsvp:
        raise RsvpNotFoundError("RSVP not found or invalid update link.")

    return RsvpDetailResponse(
        message="RSVP retrieved successfully",
        rsvp=RsvpResponse.from_dto(rsvp),
    )


@router.get(RSVP_BY_ID_URL, response_model=RsvpDetailResponse)
async def get_rsvp_by_id(
    rsvp_id: UUID,
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> RsvpDetailResponse:
    rsvp = await read_model.get_rsvp_by_id(rsvp_id)
    if not rsvp:
        raise RsvpNotFoundError()

    return RsvpDetailResponse(
        message="RSVP retrieved successfully",
        rsvp=RsvpResponse.from_dto(rsvp),
    )

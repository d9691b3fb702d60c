from fastapi import APIRouter, Depends

from src.rsvps.dependencies import get_rsvp_read_model
from src.rsvps.dtos import PartyTotalsDTO
from src.rsvps.repository.read_models import RsvpReadModel
from src.rsvps.schemas import CamelModel, RsvpResponse
from src.rsvps.urls import RSVP_ATTENDING_URL, RSVP_NOT_ATTENDING_URL, RSVP_URL

router = APIRouter()


class RsvpListResponse(CamelModel):
    message: str
    count: int
    rsvps: list[RsvpResponse]


class FilteredRsvpListResponse(RsvpListResponse):
    total_guests: int
    total_children: int


async def _list_filtered(
    read_model: RsvpReadModel, attending: bool, message: str
) -> FilteredRsvpListResponse:
    rsvps = await read_model.list_rsvps(attending=attending)
    totals = PartyTotalsDTO.from_rsvps(rsvps)
    return FilteredRsvpListResponse(
        message=message,
        count=len(rsvps),
        total_guests=totals.total_guests,
        total_children=totals.total_children,
        rsvps=[RsvpResponse.from_dto(rsvp) for rsvp in rsvps],
    )


@router.get(RSVP_URL, response_model=RsvpListResponse)
async def list_rsvps(
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> RsvpListResponse:
    rsvps = await read_model.list_rsvps()
    return RsvpListResponse(
        message="RSVPs retrieved successfully",
        count=len(rsvps),
        rsvps=[RsvpResponse.from_dto(rsvp) for rsvp in rsvps],
    )


@router.get(RSVP_ATTENDING_URL, response_model=FilteredRsvpListResponse)
async def list_attending_rsvps(
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> FilteredRsvpListResponse:
    """Attending RSVPs with guest and children totals (admin)."""
    return await _list_filtered(read_model, True, "Attending RSVPs retrieved successfully")


@router.get(RSVP_NOT_ATTENDING_URL, response_model=FilteredRsvpListResponse)
async def list_not_attending_rsvps(
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> FilteredRsvpListResponse:
    """Declined RSVPs (admin)."""
    return await _list_filtered(
        read_model, False, "Not attending RSVPs retrieved successfully"
    )

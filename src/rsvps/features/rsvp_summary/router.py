from fastapi import APIRouter, Depends

from src.rsvps.dependencies import get_rsvp_read_model
from src.rsvps.repository.read_models import RsvpReadModel
from src.rsvps.schemas import CamelModel
from src.rsvps.urls import RSVP_SUMMARY_URL

router = APIRouter()


class RsvpSummary(CamelModel):
    total_responses: int
    attending: int
    not_attending: int
    total_guests: int
    total_children: int
    total_people: int


class RsvpSummaryResponse(CamelModel):
    message: str
    summary: RsvpSummary


@router.get(RSVP_SUMMARY_URL, response_model=RsvpSummaryResponse)
async def get_rsvp_summary(
    read_model: RsvpReadModel = Depends(get_rsvp_read_model),
) -> RsvpSummaryResponse:
    """
    Response counts and head counts for the admin dashboard.
    Always computed from the current RSVPs.
    """
    summary = await read_model.get_summary()
    return RsvpSummaryResponse(
        message="RSVP summary retrieved successfully",
        summary=RsvpSummary(
            total_responses=summary.total_responses,
            attending=summary.attending,
            not_attending=summary.not_attending,
            total_guests=summary.total_guests,
            total_children=summary.total_children,
            total_people=summary.total_people,
        ),
    )

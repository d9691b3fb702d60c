from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.rsvps.dependencies import get_rsvp_write_model
from src.rsvps.repository.write_models import RsvpWriteModel
from src.rsvps.urls import RSVP_BY_ID_URL

router = APIRouter()


class DeleteRsvpResponse(BaseModel):
    message: str


@router.delete(RSVP_BY_ID_URL, response_model=DeleteRsvpResponse)
async def delete_rsvp(
    rsvp_id: UUID,
    write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
) -> DeleteRsvpResponse:
    await write_model.delete_rsvp(rsvp_id)
    return DeleteRsvpResponse(message="RSVP deleted successfully!")

"""Response bodies shared by the RSVP endpoints. JSON keys are camelCase."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.rsvps.dtos import RsvpDTO


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RsvpResponse(CamelModel):
    id: UUID
    name: str
    email: str
    attending: bool
    num_of_guests: int | None = None
    num_of_children: int | None = None
    update_token: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dto(cls, rsvp: RsvpDTO) -> "RsvpResponse":
        return cls(
            id=rsvp.id,
            name=rsvp.name,
            email=rsvp.email,
            attending=rsvp.attending,
            num_of_guests=rsvp.num_of_guests,
            num_of_children=rsvp.num_of_children,
            update_token=rsvp.update_token,
            created_at=rsvp.created_at,
            updated_at=rsvp.updated_at,
        )


class RsvpDetailResponse(CamelModel):
    message: str
    rsvp: RsvpResponse

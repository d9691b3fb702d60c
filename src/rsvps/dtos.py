from dataclasses import dataclass
from datetime import datetime
from typing import Iterable
from uuid import UUID


@dataclass(frozen=True)
class RsvpDTO:
    """DTO for a stored RSVP record."""

    id: UUID
    name: str
    email: str
    attending: bool
    update_token: str
    num_of_guests: int | None = None
    num_of_children: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def as_payload(self) -> dict:
        """Return the user-editable fields keyed the way clients send them."""
        return {
            "name": self.name,
            "email": self.email,
            "attending": self.attending,
            "numOfGuests": self.num_of_guests,
            "numOfChildren": self.num_of_children,
        }


@dataclass(frozen=True)
class PartyTotalsDTO:
    """Guest and children head counts over a set of RSVPs."""

    total_guests: int
    total_children: int

    @classmethod
    def from_rsvps(cls, rsvps: Iterable[RsvpDTO]) -> "PartyTotalsDTO":
        total_guests = 0
        total_children = 0
        for rsvp in rsvps:
            total_guests += rsvp.num_of_guests or 0
            total_children += rsvp.num_of_children or 0
        return cls(total_guests=total_guests, total_children=total_children)


@dataclass(frozen=True)
class RsvpSummaryDTO:
    """DTO for the admin summary."""

    total_responses: int
    attending: int
    not_attending: int
    total_guests: int
    total_children: int

    @property
    def total_people(self) -> int:
        return self.total_guests + self.total_children


@dataclass(frozen=True)
class EventInfoDTO:
    """DTO for event metadata and deadline status."""

    event_name: str
    event_date: datetime
    event_location: str
    rsvp_deadline: datetime
    is_deadline_passed: bool
    days_until_deadline: int
    days_until_event: int

    @property
    def can_still_rsvp(self) -> bool:
        return not self.is_deadline_passed

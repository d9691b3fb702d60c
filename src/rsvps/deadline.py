import math
from dataclasses import dataclass
from datetime import UTC, datetime

from src.config.settings import Settings
from src.rsvps.dtos import EventInfoDTO
from src.rsvps.errors import RsvpDeadlinePassedError

SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(frozen=True)
class EventConfig:
    """Event details and the RSVP cutoff used by guest-facing endpoints."""

    name: str
    date: datetime
    location: str
    rsvp_deadline: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", _as_utc(self.date))
        object.__setattr__(self, "rsvp_deadline", _as_utc(self.rsvp_deadline))

    @classmethod
    def from_settings(cls, settings: Settings) -> "EventConfig":
        return cls(
            name=settings.event_name,
            date=settings.event_date,
            location=settings.event_location,
            rsvp_deadline=settings.rsvp_deadline,
        )

    def is_deadline_passed(self, now: datetime) -> bool:
        return _as_utc(now) > self.rsvp_deadline


def days_until(target: datetime, now: datetime) -> int:
    """Whole days from ``now`` to ``target``, rounded up."""
    return math.ceil((target - _as_utc(now)).total_seconds() / SECONDS_PER_DAY)


def ensure_rsvp_open(event: EventConfig, now: datetime, blocked_message: str) -> None:
    """Raise RsvpDeadlinePassedError once the RSVP deadline is behind ``now``."""
    if event.is_deadline_passed(now):
        raise RsvpDeadlinePassedError(
            event,
            f"RSVP deadline has passed for {event.name}. {blocked_message}",
        )


def build_event_info(event: EventConfig, now: datetime) -> EventInfoDTO:
    is_deadline_passed = event.is_deadline_passed(now)
    return EventInfoDTO(
        event_name=event.name,
        event_date=event.date,
        event_location=event.location,
        rsvp_deadline=event.rsvp_deadline,
        is_deadline_passed=is_deadline_passed,
        days_until_deadline=0 if is_deadline_passed else days_until(event.rsvp_deadline, now),
        days_until_event=days_until(event.date, now),
    )

from collections.abc import Callable
from datetime import UTC, datetime
from functools import lru_cache

from src.config.settings import settings
from src.rsvps.deadline import EventConfig
from src.rsvps.repository.read_models import RsvpReadModel, SqlRsvpReadModel
from src.rsvps.repository.write_models import RsvpWriteModel, SqlRsvpWriteModel

Clock = Callable[[], datetime]


def get_rsvp_read_model() -> RsvpReadModel:
    """Dependency to get RSVP read model instance."""
    return SqlRsvpReadModel()


def get_rsvp_write_model() -> RsvpWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRsvpWriteModel()


@lru_cache
def get_event_config() -> EventConfig:
    """Event details, built once from settings."""
    return EventConfig.from_settings(settings)


def utc_now() -> datetime:
    return datetime.now(UTC)


def get_clock() -> Clock:
    return utc_now

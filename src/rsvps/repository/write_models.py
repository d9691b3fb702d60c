"""RSVP write models. Return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from src.config.database import SessionManager, async_session_manager
from src.rsvps.dtos import RsvpDTO
from src.rsvps.errors import RsvpDuplicateEmailError, RsvpNotFoundError
from src.rsvps.repository.orm_models import Rsvp
from src.rsvps.repository.read_models import (
    RsvpReadModel,
    SqlRsvpReadModel,
    store_session,
    to_dto,
)
from src.rsvps.tokens import generate_update_token
from src.rsvps.validation import RsvpFields

logger = logging.getLogger(__name__)


class RsvpWriteModel(ABC):
    @abstractmethod
    async def create_rsvp(self, fields: RsvpFields) -> RsvpDTO:
        """Store a new RSVP and issue its update token.

        Raises:
            RsvpDuplicateEmailError: an RSVP with the same email already exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_rsvp(self, rsvp_id: UUID, fields: RsvpFields) -> RsvpDTO:
        """Replace the editable fields of an RSVP with an already validated set.

        Raises:
            RsvpNotFoundError: no RSVP has this id.
            RsvpDuplicateEmailError: the new email belongs to another RSVP.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_rsvp(self, rsvp_id: UUID) -> None:
        """Remove an RSVP permanently.

        Raises:
            RsvpNotFoundError: no RSVP has this id.
        """
        raise NotImplementedError


class SqlRsvpWriteModel(RsvpWriteModel):
    """SQL implementation of RSVP write operations.

    Email uniqueness is left to the database constraint so that concurrent
    submissions for the same address cannot both succeed.
    """

    def __init__(
        self,
        session_manager: SessionManager = async_session_manager,
        read_model: RsvpReadModel | None = None,
    ) -> None:
        self.session_manager = session_manager
        self.read_model = read_model or SqlRsvpReadModel(session_manager=session_manager)

    async def create_rsvp(self, fields: RsvpFields) -> RsvpDTO:
        try:
            async with store_session(self.session_manager) as session:
                rsvp = Rsvp(
                    name=fields.name,
                    email=fields.email,
                    attending=fields.attending,
                    num_of_guests=fields.num_of_guests,
                    num_of_children=fields.num_of_children,
                    update_token=generate_update_token(),
                )
                session.add(rsvp)
                await session.flush()
                await session.refresh(rsvp)
                created = to_dto(rsvp)
        except IntegrityError as e:
            await self._raise_if_duplicate(fields.email, e)
            raise

        logger.info("Created RSVP %s (attending=%s)", created.id, created.attending)
        return created

    async def update_rsvp(self, rsvp_id: UUID, fields: RsvpFields) -> RsvpDTO:
        try:
            async with store_session(self.session_manager) as session:
                result = await session.execute(select(Rsvp).where(Rsvp.uuid == rsvp_id))
                rsvp = result.scalar_one_or_none()
                if rsvp is None:
                    raise RsvpNotFoundError("RSVP not found. It may have been deleted.")

                rsvp.name = fields.name
                rsvp.email = fields.email
                rsvp.attending = fields.attending
                rsvp.num_of_guests = fields.num_of_guests
                rsvp.num_of_children = fields.num_of_children
                await session.flush()
                await session.refresh(rsvp)
                updated = to_dto(rsvp)
        except IntegrityError as e:
            await self._raise_if_duplicate(fields.email, e)
            raise

        logger.info("Updated RSVP %s (attending=%s)", updated.id, updated.attending)
        return updated

    async def delete_rsvp(self, rsvp_id: UUID) -> None:
        async with store_session(self.session_manager) as session:
            result = await session.execute(delete(Rsvp).where(Rsvp.uuid == rsvp_id))
            if result.rowcount == 0:
                raise RsvpNotFoundError("RSVP not found. It may have already been deleted.")

        logger.info("Deleted RSVP %s", rsvp_id)

    async def _raise_if_duplicate(self, email: str, error: IntegrityError) -> None:
        existing = await self.read_model.get_rsvp_by_email(email)
        if existing is not None:
            raise RsvpDuplicateEmailError(existing) from error

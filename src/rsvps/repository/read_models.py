"""RSVP read models. Return DTOs, never ORM models."""

import abc
import contextlib
from collections.abc import AsyncIterator
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import SessionManager, async_session_manager
from src.rsvps.dtos import RsvpDTO, RsvpSummaryDTO
from src.rsvps.errors import RsvpStoreUnavailableError
from src.rsvps.repository.orm_models import Rsvp


@contextlib.asynccontextmanager
async def store_session(session_manager: SessionManager) -> AsyncIterator[AsyncSession]:
    """Open a unit of work, reporting database failures as RsvpStoreUnavailableError.

    IntegrityError is passed through for the write model to interpret.
    """
    try:
        async with session_manager() as session:
            yield session
    except IntegrityError:
        raise
    except SQLAlchemyError as e:
        raise RsvpStoreUnavailableError(str(e)) from e


def to_dto(rsvp: Rsvp) -> RsvpDTO:
    return RsvpDTO(
        id=rsvp.uuid,
        name=rsvp.name,
        email=rsvp.email,
        attending=rsvp.attending,
        num_of_guests=rsvp.num_of_guests,
        num_of_children=rsvp.num_of_children,
        update_token=rsvp.update_token,
        created_at=rsvp.created_at,
        updated_at=rsvp.updated_at,
    )


class RsvpReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_rsvps(self, attending: bool | None = None) -> list[RsvpDTO]:
        """List RSVPs, optionally only those with the given attending answer."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_rsvp_by_id(self, rsvp_id: UUID) -> RsvpDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_rsvp_by_token(self, token: str) -> RsvpDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_rsvp_by_email(self, email: str) -> RsvpDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def count_rsvps(self, attending: bool | None = None) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_summary(self) -> RsvpSummaryDTO:
        """Response counts and head counts over attending RSVPs, computed live."""
        raise NotImplementedError


class SqlRsvpReadModel(RsvpReadModel):
    """SQL implementation of RSVP read model."""

    def __init__(self, session_manager: SessionManager = async_session_manager) -> None:
        self.session_manager = session_manager

    async def list_rsvps(self, attending: bool | None = None) -> list[RsvpDTO]:
        stmt = select(Rsvp).order_by(Rsvp.created_at, Rsvp.email)
        if attending is not None:
            stmt = stmt.where(Rsvp.attending == attending)
        async with store_session(self.session_manager) as session:
            result = await session.execute(stmt)
            return [to_dto(rsvp) for rsvp in result.scalars().all()]

    async def get_rsvp_by_id(self, rsvp_id: UUID) -> RsvpDTO | None:
        return await self._get_one(Rsvp.uuid == rsvp_id)

    async def get_rsvp_by_token(self, token: str) -> RsvpDTO | None:
        return await self._get_one(Rsvp.update_token == token)

    async def get_rsvp_by_email(self, email: str) -> RsvpDTO | None:
        return await self._get_one(Rsvp.email == email.strip().lower())

    async def count_rsvps(self, attending: bool | None = None) -> int:
        stmt = select(func.count()).select_from(Rsvp)
        if attending is not None:
            stmt = stmt.where(Rsvp.attending == attending)
        async with store_session(self.session_manager) as session:
            result = await session.execute(stmt)
            return result.scalar_one()

    async def get_summary(self) -> RsvpSummaryDTO:
        attending_guests = case((Rsvp.attending.is_(True), Rsvp.num_of_guests), else_=0)
        attending_children = case((Rsvp.attending.is_(True), Rsvp.num_of_children), else_=0)
        stmt = select(
            func.count(Rsvp.uuid),
            func.count(Rsvp.uuid).filter(Rsvp.attending.is_(True)),
            func.count(Rsvp.uuid).filter(Rsvp.attending.is_(False)),
            func.coalesce(func.sum(attending_guests), 0),
            func.coalesce(func.sum(attending_children), 0),
        )
        async with store_session(self.session_manager) as session:
            result = await session.execute(stmt)
            total, attending, not_attending, guests, children = result.one()

        return RsvpSummaryDTO(
            total_responses=total,
            attending=attending,
            not_attending=not_attending,
            total_guests=int(guests),
            total_children=int(children),
        )

    async def _get_one(self, criterion) -> RsvpDTO | None:
        async with store_session(self.session_manager) as session:
            result = await session.execute(select(Rsvp).where(criterion))
            rsvp = result.scalar_one_or_none()
            return to_dto(rsvp) if rsvp else None

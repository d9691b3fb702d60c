"""Domain errors for RSVPs and their HTTP rendering."""

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.rsvps.urls import RSVP_BY_TOKEN_ROUTE

if TYPE_CHECKING:
    from src.rsvps.deadline import EventConfig
    from src.rsvps.dtos import RsvpDTO

logger = logging.getLogger(__name__)


class RsvpError(Exception):
    """Base class for RSVP domain errors."""


class RsvpValidationError(RsvpError):
    """Raised when an RSVP payload fails validation.

    ``errors`` maps each failing field to a single user-facing message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors.values()))


class RsvpDuplicateEmailError(RsvpError):
    """Raised when an RSVP already exists for the submitted email."""

    def __init__(self, existing: "RsvpDTO") -> None:
        self.existing = existing
        super().__init__(f"An RSVP already exists for '{existing.email}'")


class RsvpDeadlinePassedError(RsvpError):
    """Raised when a guest tries to create or change an RSVP after the deadline."""

    def __init__(self, event: "EventConfig", message: str) -> None:
        self.event = event
        self.message = message
        super().__init__(message)


class RsvpNotFoundError(RsvpError):
    """Raised when no RSVP matches the given id or token."""

    def __init__(self, message: str = "RSVP not found") -> None:
        self.message = message
        super().__init__(message)


class RsvpStoreUnavailableError(RsvpError):
    """Raised when the RSVP store cannot serve a request."""


def update_link_for(request: Request, token: str) -> str:
    return str(request.url_for(RSVP_BY_TOKEN_ROUTE, token=token))


async def validation_error_handler(request: Request, exc: RsvpValidationError) -> JSONResponse:
    return _validation_response(exc.errors)


def _validation_response(errors: dict[str, str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "We found some issues with your RSVP information:",
            "errors": list(errors.values()),
            "fieldErrors": errors,
            "help": "Please fix the issues above and submit your RSVP again.",
        },
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed requests in the RSVP error format.

    An id that is not a UUID cannot name an RSVP, so it is reported as not
    found. A missing, unparsable or non-object body is a validation failure.
    """
    if any(error["loc"] and error["loc"][0] == "path" for error in exc.errors()):
        return await not_found_handler(request, RsvpNotFoundError())
    return _validation_response({"body": "RSVP data must be a JSON object"})


async def duplicate_email_handler(request: Request, exc: RsvpDuplicateEmailError) -> JSONResponse:
    existing = exc.existing
    logger.info("Rejected duplicate RSVP for existing record %s", existing.id)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "message": "You have already submitted an RSVP. Use your update link to make changes.",
            "existingRsvp": {
                "name": existing.name,
                "email": existing.email,
                "attending": existing.attending,
            },
            "updateLink": update_link_for(request, existing.update_token),
        },
    )


async def deadline_passed_handler(request: Request, exc: RsvpDeadlinePassedError) -> JSONResponse:
    logger.info("Blocked %s %s after the RSVP deadline", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content=jsonable_encoder(
            {
                "message": exc.message,
                "eventName": exc.event.name,
                "deadline": exc.event.rsvp_deadline,
                "eventDate": exc.event.date,
            }
        ),
    )


async def not_found_handler(request: Request, exc: RsvpNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": exc.message},
    )


async def store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "RSVP store error while handling %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Unable to process RSVPs right now. Please try again later."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RsvpValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(RsvpDuplicateEmailError, duplicate_email_handler)
    app.add_exception_handler(RsvpDeadlinePassedError, deadline_passed_handler)
    app.add_exception_handler(RsvpNotFoundError, not_found_handler)
    app.add_exception_handler(RsvpStoreUnavailableError, store_unavailable_handler)
    app.add_exception_handler(SQLAlchemyError, store_unavailable_handler)

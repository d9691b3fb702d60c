"""Validation rules for RSVP payloads.

Every field is checked independently so a single submission reports all of
its problems at once. Guest and children counts are only required when the
guest is attending.
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from src.rsvps.errors import RsvpValidationError

EMAIL_PATTERN = (
    r"^[A-Za-z0-9_]+(?:[.-][A-Za-z0-9_]+)*"
    r"@[A-Za-z0-9_]+(?:[.-][A-Za-z0-9_]+)*\.[A-Za-z0-9_]{2,}$"
)

# counts are stored in 32-bit integer columns
MIN_COUNT = -(2**31)
MAX_COUNT = 2**31 - 1

DEFAULT_MESSAGES = {
    "name": "name is required",
    "email": "valid email required",
    "attending": "attending is required",
    "numOfGuests": "numOfGuests must be a whole number",
    "numOfChildren": "numOfChildren must be a whole number",
}


class RsvpFields(BaseModel):
    """The user-editable part of an RSVP, normalized."""

    model_config = ConfigDict(strict=True, frozen=True, alias_generator=to_camel)

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    email: Annotated[
        str,
        StringConstraints(strip_whitespace=True, to_lower=True, pattern=EMAIL_PATTERN),
    ]
    attending: bool
    num_of_guests: int | None = Field(default=None, validate_default=True)
    num_of_children: int | None = Field(default=None, validate_default=True)

    @field_validator("num_of_guests")
    @classmethod
    def check_num_of_guests(cls, value: int | None, info: ValidationInfo) -> int | None:
        _check_range("numOfGuests", value)
        if info.data.get("attending") is not True:
            return value
        if value is None:
            raise ValueError("numOfGuests is required when attending")
        if value < 1:
            raise ValueError("Number of guests must be at least 1 if attending")
        return value

    @field_validator("num_of_children")
    @classmethod
    def check_num_of_children(cls, value: int | None, info: ValidationInfo) -> int | None:
        _check_range("numOfChildren", value)
        if info.data.get("attending") is not True:
            return value
        if value is None:
            raise ValueError("numOfChildren is required when attending")
        if value < 0:
            raise ValueError("Number of children cannot be negative")
        return value


def _check_range(field: str, value: int | None) -> None:
    if value is not None and not MIN_COUNT <= value <= MAX_COUNT:
        raise ValueError(f"{field} is out of range")


def _field_messages(exc: ValidationError) -> dict[str, str]:
    # defaults are validated under the attribute name, payload values under the alias
    fields = RsvpFields.model_fields
    messages: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        if field in fields:
            field = fields[field].alias or to_camel(field)
        if field in messages:
            continue
        if error["type"] == "value_error":
            messages[field] = str(error["ctx"]["error"])
        else:
            messages[field] = DEFAULT_MESSAGES.get(field, error["msg"])
    return messages


def validate_rsvp(payload: Mapping[str, Any]) -> RsvpFields:
    """Validate a camelCase RSVP payload.

    Raises:
        RsvpValidationError: with one message per failing field.
    """
    try:
        return RsvpFields.model_validate(dict(payload))
    except ValidationError as e:
        raise RsvpValidationError(_field_messages(e)) from e


def apply_attending_defaults(existing_attending: bool, changes: Mapping[str, Any]) -> dict:
    """Fill in head counts when a guest switches an RSVP from no to yes.

    Counts the guest did supply are kept as sent.
    """
    changes = dict(changes)
    if changes.get("attending") is True and not existing_attending:
        if changes.get("numOfGuests") is None:
            changes["numOfGuests"] = 1
        if changes.get("numOfChildren") is None:
            changes["numOfChildren"] = 0
    return changes

"""
Declarative rules for the pizza order form.

Each field carries one rule set and the human readable message for every way
it can fail. Failures are reported as pydantic errors whose ``type`` names the
failure (``too_short``, ``too_long``, ``invalid_size`` and so on) and whose
``msg`` is the exact text shown next to the field.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.application.exceptions import UnknownFieldError
from app.domain.entities.order_form import FULL_NAME, SIZE, SIZES, TOPPINGS, FormValues

FULL_NAME_MIN_LENGTH = 3
FULL_NAME_MAX_LENGTH = 20

FULL_NAME_TOO_SHORT = f"full name must be at least {FULL_NAME_MIN_LENGTH} characters"
FULL_NAME_TOO_LONG = f"full name must be at most {FULL_NAME_MAX_LENGTH} characters"
FULL_NAME_REQUIRED = "Full name is required"
SIZE_INCORRECT = "size must be S or M or L"
SIZE_REQUIRED = "Size is required"
TOPPINGS_INVALID = "toppings must be a list of strings"

FIELD_NAMES: tuple[str, ...] = (FULL_NAME, SIZE, TOPPINGS)

# Known-good stand-ins so one field can be checked in isolation.
_PLACEHOLDERS: dict[str, Any] = {
    FULL_NAME: "Placeholder",
    SIZE: "M",
    TOPPINGS: [],
}


class OrderPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    full_name: str = Field(alias=FULL_NAME)
    size: str = Field(alias=SIZE)
    toppings: list[str] = Field(default_factory=list, alias=TOPPINGS)

    @field_validator("full_name", mode="before")
    @classmethod
    def full_name_valid(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
        if v is None or v == "":
            raise PydanticCustomError("full_name_required", FULL_NAME_REQUIRED)
        if not isinstance(v, str):
            return v
        if len(v) < FULL_NAME_MIN_LENGTH:
            raise PydanticCustomError("too_short", FULL_NAME_TOO_SHORT)
        if len(v) > FULL_NAME_MAX_LENGTH:
            raise PydanticCustomError("too_long", FULL_NAME_TOO_LONG)
        return v

    @field_validator("size", mode="before")
    @classmethod
    def size_valid(cls, v: Any) -> Any:
        if v is None:
            raise PydanticCustomError("size_required", SIZE_REQUIRED)
        if v not in SIZES:
            raise PydanticCustomError("invalid_size", SIZE_INCORRECT)
        return v

    @field_validator("toppings", mode="before")
    @classmethod
    def toppings_valid(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)) or not all(isinstance(t, str) for t in v):
            raise PydanticCustomError("invalid_toppings", TOPPINGS_INVALID)
        return list(v)


def validate(payload: dict[str, Any]) -> OrderPayload:
    """Validate a whole order. Raises ``pydantic.ValidationError``."""
    return OrderPayload.model_validate(payload)


def validate_field(field_name: str, value: Any) -> str:
    """Return the first failing message for one field, or "" when it passes."""
    if field_name not in FIELD_NAMES:
        raise UnknownFieldError(f"Unknown order form field: {field_name}")

    data = dict(_PLACEHOLDERS)
    data[field_name] = value
    try:
        validate(data)
    except ValidationError as e:
        for error in e.errors():
            if error["loc"] and error["loc"][0] == field_name:
                return error["msg"]
    return ""


def first_error(payload: dict[str, Any]) -> str:
    """First failing message across the whole order, or "" when it is valid."""
    try:
        validate(payload)
    except ValidationError as e:
        errors = e.errors()
        if errors:
            return errors[0]["msg"]
    return ""


def is_valid(values: FormValues) -> bool:
    try:
        validate(values.to_payload())
    except ValidationError:
        return False
    return True

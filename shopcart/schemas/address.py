# shopcart/schemas/address.py
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

MIN_NAME_LENGTH = 3
MIN_PHONE_DIGITS = 10
MIN_ADDRESS_LENGTH = 10


def validate_full_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("full name is required")
    if len(v) < MIN_NAME_LENGTH:
        raise ValueError(f"full name must have at least {MIN_NAME_LENGTH} characters")
    return v


def validate_phone(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("phone is required")
    if len(v) < MIN_PHONE_DIGITS:
        raise ValueError(f"phone must have at least {MIN_PHONE_DIGITS} digits")
    if not v.isdigit():
        raise ValueError("phone may only contain digits")
    return v


def validate_full_address(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("address is required")
    if len(v) < MIN_ADDRESS_LENGTH:
        raise ValueError(f"address must have at least {MIN_ADDRESS_LENGTH} characters")
    return v


class AddressBase(SQLModel):
    """
    Editable address fields.

    Values are trimmed before they are checked.
    """

    model_config = ConfigDict(extra="forbid")

    full_name: str
    phone: str
    full_address: str
    is_default: bool = False

    @field_validator("full_name")
    @classmethod
    def check_full_name(cls, v: str) -> str:
        return validate_full_name(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        return validate_phone(v)

    @field_validator("full_address")
    @classmethod
    def check_full_address(cls, v: str) -> str:
        return validate_full_address(v)


class AddressCreate(AddressBase):
    """Payload for saving a new address."""

    pass


class AddressUpdate(AddressBase):
    """Payload for replacing the fields of an existing address."""

    pass


class AddressRead(SQLModel):
    id: str
    owner_id: str
    full_name: str
    phone: str
    full_address: str
    is_default: bool
    created_at: datetime
    updated_at: datetime


class AddressCount(SQLModel):
    count: int

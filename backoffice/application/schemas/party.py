"""Shared DTOs for suppliers and customers (both are "parties")."""

from datetime import date, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from backoffice.domain.entities import AddressType, ContactType, StatusActive

from .common import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    ZIPCODE_PATTERN,
    ensure_single_primary,
    ensure_unique,
)


class AddressInput(BaseModel):
    """Address sub-record; an ``id`` means "update that address"."""

    id: str | None = Field(None, max_length=36)
    address_type: AddressType
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    country_code: str = Field("ID", min_length=2, max_length=3)
    zipcode: str | None = Field(None, pattern=ZIPCODE_PATTERN)
    province_code: str | None = Field(None, max_length=13)
    regency_code: str | None = Field(None, max_length=13)
    district_code: str | None = Field(None, max_length=13)
    is_primary: bool = False


class ContactInput(BaseModel):
    id: str | None = Field(None, max_length=36)
    contact_type: ContactType
    name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(
        ..., min_length=10, max_length=14, pattern=PHONE_PATTERN,
        examples=["081234567890"],
    )
    email: str | None = Field(None, max_length=100, pattern=EMAIL_PATTERN)
    is_primary: bool = False


def _check_addresses(value: list[AddressInput]) -> list[AddressInput]:
    ensure_single_primary(value, "address")
    ensure_unique(value, "address_type", "address type")
    return value


def _check_contacts(value: list[ContactInput]) -> list[ContactInput]:
    ensure_single_primary(value, "contact")
    ensure_unique(value, "contact_type", "contact type")
    return value


AddressList = Annotated[list[AddressInput], AfterValidator(_check_addresses)]
ContactList = Annotated[list[ContactInput], AfterValidator(_check_contacts)]


class PartyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Acme Corp"])
    status_active: StatusActive = StatusActive.ACTIVE
    active_date: date | None = None
    notes: str | None = Field(None, max_length=500)
    npwp_number: str | None = Field(None, max_length=30)
    npwp_name: str | None = Field(None, max_length=100)
    npwp_address: str | None = Field(None, max_length=255)
    npwp_date: date | None = None
    addresses: AddressList = Field(default_factory=list)
    contacts: ContactList = Field(default_factory=list)


class PartyUpdate(BaseModel):
    """All fields optional; a sub-record list, when sent, replaces the current set."""

    name: str | None = Field(None, min_length=1, max_length=100)
    status_active: StatusActive | None = None
    active_date: date | None = None
    notes: str | None = Field(None, max_length=500)
    npwp_number: str | None = Field(None, max_length=30)
    npwp_name: str | None = Field(None, max_length=100)
    npwp_address: str | None = Field(None, max_length=255)
    npwp_date: date | None = None
    addresses: AddressList | None = None
    contacts: ContactList | None = None

    model_config = {"extra": "forbid"}


class AddressResponse(BaseModel):
    id: str
    address_type: AddressType
    address_line1: str
    address_line2: str | None
    country_code: str
    zipcode: str | None
    province_code: str | None
    regency_code: str | None
    district_code: str | None
    is_primary: bool

    model_config = {"from_attributes": True}


class ContactResponse(BaseModel):
    id: str
    contact_type: ContactType
    name: str
    phone_number: str
    email: str | None
    is_primary: bool

    model_config = {"from_attributes": True}


class PartyResponse(BaseModel):
    id: str
    code: str
    name: str
    status_active: StatusActive
    active_date: date | None
    notes: str | None
    npwp_number: str | None
    npwp_name: str | None
    npwp_address: str | None
    npwp_date: date | None
    addresses: list[AddressResponse]
    contacts: list[ContactResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

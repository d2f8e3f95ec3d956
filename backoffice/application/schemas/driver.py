"""Pydantic DTOs for the Driver feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from backoffice.domain.entities import Gender

from .common import PHONE_PATTERN


class DriverCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=10, pattern=r"^[A-Z0-9-]+$")
    name: str = Field(..., min_length=1, max_length=100)
    gender: Gender
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=10, max_length=14, pattern=PHONE_PATTERN)
    status_active: bool = True
    active_date: date | None = None


class DriverUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    gender: Gender | None = None
    address_line1: str | None = Field(None, min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    city: str | None = Field(None, min_length=1, max_length=100)
    phone_number: str | None = Field(
        None, min_length=10, max_length=14, pattern=PHONE_PATTERN
    )
    status_active: bool | None = None
    active_date: date | None = None

    model_config = {"extra": "forbid"}


class DriverResponse(BaseModel):
    id: str
    code: str
    name: str
    gender: Gender
    address_line1: str
    address_line2: str | None
    city: str
    phone_number: str
    status_active: bool
    active_date: date | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

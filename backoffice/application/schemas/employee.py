"""Pydantic DTOs for the Employee feature."""

from datetime import date, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, model_validator

from backoffice.domain.entities import Gender

from .common import PHONE_PATTERN, ZIPCODE_PATTERN


class EmploymentInput(BaseModel):
    id: str | None = Field(None, max_length=36)
    start_date: date
    end_date: date | None = None
    position: str = Field(..., min_length=1, max_length=100)
    division: str = Field(..., min_length=1, max_length=100)

    @model_validator(mode="after")
    def _check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


def _single_open_employment(value: list[EmploymentInput]) -> list[EmploymentInput]:
    if value and sum(1 for e in value if e.end_date is None) > 1:
        raise ValueError("Only one employment can be open-ended")
    return value


EmploymentList = Annotated[list[EmploymentInput], AfterValidator(_single_open_employment)]


class EmployeeCreate(BaseModel):
    nik: str = Field(..., min_length=1, max_length=12, pattern=r"^[A-Z0-9-]+$")
    name: str = Field(..., min_length=1, max_length=100)
    gender: Gender
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    zipcode: str = Field(..., pattern=ZIPCODE_PATTERN)
    phone_number: str = Field(..., min_length=10, max_length=14, pattern=PHONE_PATTERN)
    is_active: bool = True
    active_date: date | None = None
    resign_date: date | None = None
    photo: str | None = Field(None, max_length=255)
    employments: EmploymentList = Field(default_factory=list)


class EmployeeUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    gender: Gender | None = None
    address: str | None = Field(None, min_length=1, max_length=255)
    city: str | None = Field(None, min_length=1, max_length=100)
    zipcode: str | None = Field(None, pattern=ZIPCODE_PATTERN)
    phone_number: str | None = Field(
        None, min_length=10, max_length=14, pattern=PHONE_PATTERN
    )
    is_active: bool | None = None
    active_date: date | None = None
    resign_date: date | None = None
    photo: str | None = Field(None, max_length=255)
    employments: EmploymentList | None = None

    model_config = {"extra": "forbid"}


class EmploymentResponse(BaseModel):
    id: str
    start_date: date
    end_date: date | None
    position: str
    division: str

    model_config = {"from_attributes": True}


class EmployeeResponse(BaseModel):
    id: str
    nik: str
    name: str
    gender: Gender
    address: str
    city: str
    zipcode: str
    phone_number: str
    is_active: bool
    active_date: date | None
    resign_date: date | None
    photo: str | None
    employments: list[EmploymentResponse]
    current_employment: EmploymentResponse | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

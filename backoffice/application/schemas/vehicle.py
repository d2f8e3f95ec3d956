"""Pydantic DTOs for the Vehicle feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from backoffice.domain.entities import VehicleType


class VehicleCreate(BaseModel):
    vehicle_number: str = Field(
        ..., min_length=1, max_length=15, pattern=r"^[A-Z0-9\s]+$", examples=["B 1234 XYZ"],
    )
    vehicle_type: VehicleType
    vehicle_make: str | None = Field(None, max_length=50)
    vehicle_year: str | None = Field(None, pattern=r"^\d{4}$")


class VehicleUpdate(BaseModel):
    vehicle_type: VehicleType | None = None
    vehicle_make: str | None = Field(None, max_length=50)
    vehicle_year: str | None = Field(None, pattern=r"^\d{4}$")

    model_config = {"extra": "forbid"}


class VehicleResponse(BaseModel):
    id: str
    vehicle_number: str
    vehicle_type: VehicleType
    vehicle_make: str | None
    vehicle_year: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

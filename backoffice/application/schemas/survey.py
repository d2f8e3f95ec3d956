"""Pydantic DTOs for cargo surveys."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from backoffice.domain.entities import (
    CargoType,
    ShipmentDetail,
    ShipmentType,
    SurveyStatus,
)


class SurveyItemInput(BaseModel):
    """Dimensions in centimetres; ``cbm`` is derived and never accepted."""

    name: str = Field(..., min_length=1, max_length=100)
    width: float = Field(..., ge=0)
    length: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    quantity: int = Field(..., gt=0)
    note: str | None = Field(None, max_length=255)


class SurveyCreate(BaseModel):
    survey_date: date
    work_date: date
    customer_id: str = Field(..., min_length=1, max_length=36)
    origin: str = Field(..., min_length=1, max_length=255)
    destination: str = Field(..., min_length=1, max_length=255)
    cargo_type: CargoType
    shipment_type: ShipmentType
    shipment_detail: ShipmentDetail
    items: list[SurveyItemInput] = Field(..., min_length=1)
    created_by: str = Field("system", min_length=1, max_length=100)


class SurveyUpdate(BaseModel):
    """Sent items replace the current ones wholesale."""

    survey_date: date | None = None
    work_date: date | None = None
    customer_id: str | None = Field(None, min_length=1, max_length=36)
    origin: str | None = Field(None, min_length=1, max_length=255)
    destination: str | None = Field(None, min_length=1, max_length=255)
    cargo_type: CargoType | None = None
    shipment_type: ShipmentType | None = None
    shipment_detail: ShipmentDetail | None = None
    items: list[SurveyItemInput] | None = Field(None, min_length=1)

    model_config = {"extra": "forbid"}


class SurveyStatusUpdate(BaseModel):
    status: SurveyStatus
    remarks: str | None = Field(None, max_length=500)
    changed_by: str = Field("system", min_length=1, max_length=100)


class SurveyItemResponse(BaseModel):
    id: str
    name: str
    width: float
    length: float
    height: float
    quantity: int
    cbm: float
    note: str | None

    model_config = {"from_attributes": True}


class SurveyStatusHistoryResponse(BaseModel):
    id: str
    status: SurveyStatus
    changed_by: str
    remarks: str | None
    changed_at: datetime

    model_config = {"from_attributes": True}


class SurveyResponse(BaseModel):
    id: str
    survey_no: str
    survey_date: date
    work_date: date
    customer_id: str
    customer_name: str | None
    origin: str
    destination: str
    cargo_type: CargoType
    shipment_type: ShipmentType
    shipment_detail: ShipmentDetail
    status_survey: SurveyStatus
    total_cbm: float
    items: list[SurveyItemResponse]
    status_histories: list[SurveyStatusHistoryResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SurveyStatusBreakdown(BaseModel):
    on_progress: int
    approved: int
    rejected: int


class SurveyStatsResponse(BaseModel):
    total_surveys: int
    today_surveys: int
    this_month_surveys: int
    status_breakdown: SurveyStatusBreakdown

"""Domain entity: a cargo survey with measured items and a status trail."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import ClassVar
from uuid import uuid4

from .base import MutableEntity, utcnow


class CargoType(str, Enum):
    FCL = "FCL"
    LCL = "LCL"
    FULL_TRUCK = "FULL_TRUCK"


class ShipmentType(str, Enum):
    DOMESTIC = "DOMESTIC"
    INTERNATIONAL = "INTERNATIONAL"


class ShipmentDetail(str, Enum):
    SEA = "SEA"
    DOM = "DOM"
    AIR = "AIR"


class SurveyStatus(str, Enum):
    ONPROGRESS = "ONPROGRESS"
    APPROVED = "APPROVED"
    REJECT = "REJECT"


@dataclass
class SurveyItem:
    name: str
    width: float
    length: float
    height: float
    quantity: int
    cbm: float = 0.0
    note: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class SurveyStatusHistory:
    status: SurveyStatus
    changed_by: str
    remarks: str | None = None
    changed_at: datetime = field(default_factory=utcnow)
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class Survey(MutableEntity):
    survey_no: str
    survey_date: date
    work_date: date
    customer_id: str
    origin: str
    destination: str
    cargo_type: CargoType
    shipment_type: ShipmentType
    shipment_detail: ShipmentDetail
    status_survey: SurveyStatus = SurveyStatus.ONPROGRESS
    customer_name: str | None = None
    items: list[SurveyItem] = field(default_factory=list)
    status_histories: list[SurveyStatusHistory] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    _immutable_fields: ClassVar[frozenset[str]] = frozenset(
        {"id", "survey_no", "created_at", "status_histories"}
    )

    @property
    def total_cbm(self) -> float:
        return round(sum(item.cbm for item in self.items), 4)

    def change_status(
        self, status: SurveyStatus, changed_by: str, remarks: str | None = None
    ) -> SurveyStatusHistory:
        """Move the survey to a new status and record the change."""
        entry = SurveyStatusHistory(status=status, changed_by=changed_by, remarks=remarks)
        self.status_survey = status
        self.status_histories.insert(0, entry)
        self.updated_at = utcnow()
        return entry

"""Domain entity: a fleet vehicle."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar
from uuid import uuid4

from .base import MutableEntity, utcnow


class VehicleType(str, Enum):
    BOX = "BOX"
    TRUCK = "TRUCK"
    WINGBOX = "WINGBOX"
    TRONTON = "TRONTON"
    TRAILER = "TRAILER"
    PICKUP = "PICKUP"
    VAN = "VAN"


@dataclass
class Vehicle(MutableEntity):
    vehicle_number: str
    vehicle_type: VehicleType
    vehicle_make: str | None = None
    vehicle_year: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    _immutable_fields: ClassVar[frozenset[str]] = frozenset(
        {"id", "vehicle_number", "created_at"}
    )

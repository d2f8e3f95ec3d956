"""Domain entity: a delivery driver."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import ClassVar
from uuid import uuid4

from .base import MutableEntity, utcnow


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


@dataclass
class Driver(MutableEntity):
    code: str
    name: str
    gender: Gender
    address_line1: str
    city: str
    phone_number: str
    address_line2: str | None = None
    status_active: bool = True
    active_date: date | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "code", "created_at"})

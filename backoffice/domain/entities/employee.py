"""Domain entity: an employee and their employment history."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import ClassVar
from uuid import uuid4

from .base import MutableEntity, utcnow
from .driver import Gender


@dataclass
class Employment:
    start_date: date
    position: str
    division: str
    end_date: date | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def is_current(self) -> bool:
        return self.end_date is None


@dataclass
class Employee(MutableEntity):
    nik: str
    name: str
    gender: Gender
    address: str
    city: str
    zipcode: str
    phone_number: str
    is_active: bool = True
    active_date: date | None = None
    resign_date: date | None = None
    photo: str | None = None
    employments: list[Employment] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "nik", "created_at"})

    @property
    def current_employment(self) -> Employment | None:
        """The open-ended employment, else the one that started last."""
        if not self.employments:
            return None
        for employment in self.employments:
            if employment.is_current:
                return employment
        return max(self.employments, key=lambda e: e.start_date)

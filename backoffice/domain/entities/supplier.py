"""Domain entity: a supplier the warehouse buys material from."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import ClassVar
from uuid import uuid4

from .base import MutableEntity, utcnow
from .party import Address, Contact, StatusActive


class SupplierType(str, Enum):
    LOGISTIC = "LOGISTIC"
    SERVICES = "SERVICES"
    MATERIAL = "MATERIAL"


@dataclass
class Supplier(MutableEntity):
    code: str
    name: str
    supplier_type: SupplierType
    status_active: StatusActive = StatusActive.ACTIVE
    active_date: date | None = None
    notes: str | None = None
    npwp_number: str | None = None
    npwp_name: str | None = None
    npwp_address: str | None = None
    npwp_date: date | None = None
    addresses: list[Address] = field(default_factory=list)
    contacts: list[Contact] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "code", "created_at"})

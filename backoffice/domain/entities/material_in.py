"""Domain entity: a material purchase ("material in") with line items."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar
from uuid import uuid4

from .base import MutableEntity, utcnow
from .material import StockType


@dataclass
class MaterialInItem:
    material_id: str
    quantity: int
    unit_price: float
    total_price: float = 0.0
    stock_type: StockType = StockType.GOOD
    stock_before: int = 0
    stock_after: int = 0
    notes: str | None = None
    material_code: str | None = None
    material_name: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class MaterialIn(MutableEntity):
    transaction_no: str
    supplier_id: str
    supplier_name: str
    transaction_date: datetime = field(default_factory=utcnow)
    invoice_no: str | None = None
    total_amount_before_tax: float = 0.0
    total_tax: float | None = None
    other_costs: float | None = None
    total_amount: float = 0.0
    notes: str | None = None
    created_by: str | None = None
    items: list[MaterialInItem] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    _immutable_fields: ClassVar[frozenset[str]] = frozenset(
        {"id", "transaction_no", "created_at", "items"}
    )

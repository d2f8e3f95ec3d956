"""Domain entity: a stocked material with good/bad stock buckets."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar
from uuid import uuid4

from .base import MutableEntity, utcnow


class MaterialCategory(str, Enum):
    RAW_MATERIAL = "RAW_MATERIAL"
    CONSUMABLES = "CONSUMABLES"
    SPARE_PARTS = "SPARE_PARTS"
    PACKAGING = "PACKAGING"
    TOOLS = "TOOLS"


class Unit(str, Enum):
    PCS = "PCS"
    BOX = "BOX"
    KG = "KG"
    METER = "METER"
    ROLL = "ROLL"
    LITER = "LITER"


class StockType(str, Enum):
    GOOD = "GOOD"
    BAD = "BAD"


class StockStatus(str, Enum):
    CRITICAL = "critical"
    LOW = "low"
    HIGH = "high"
    NORMAL = "normal"


@dataclass
class Material(MutableEntity):
    code: str
    name: str
    category: MaterialCategory
    unit: Unit
    brand: str | None = None
    description: str | None = None
    current_stock: int = 0
    minimum_stock: int = 0
    maximum_stock: int | None = None
    good_stock: int = 0
    bad_stock: int = 0
    last_purchase_price: float | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "code", "created_at"})

    @property
    def stock_status(self) -> StockStatus:
        if self.current_stock <= self.minimum_stock:
            return StockStatus.CRITICAL
        if self.current_stock <= self.minimum_stock * 1.5:
            return StockStatus.LOW
        if self.maximum_stock and self.current_stock >= self.maximum_stock * 0.9:
            return StockStatus.HIGH
        return StockStatus.NORMAL

    def book_stock(self, stock_type: StockType, quantity: int) -> tuple[int, int]:
        """Add (or with a negative quantity, remove) stock in one bucket.

        Returns the bucket level before and after the booking. The total
        ``current_stock`` moves by the same amount.
        """
        before = self.bad_stock if stock_type == StockType.BAD else self.good_stock
        after = before + quantity
        if after < 0:
            raise ValueError(
                f"Material {self.code}: {stock_type.value} stock cannot go below zero"
            )
        if stock_type == StockType.BAD:
            self.bad_stock = after
        else:
            self.good_stock = after
        self.current_stock = max(self.current_stock + quantity, 0)
        self.updated_at = utcnow()
        return before, after

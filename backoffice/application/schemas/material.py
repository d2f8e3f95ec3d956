"""Pydantic DTOs for the Material feature."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from backoffice.domain.entities import MaterialCategory, StockStatus, Unit


class MaterialCreate(BaseModel):
    code: str = Field(
        ..., min_length=1, max_length=12, pattern=r"^[A-Z0-9-_]+$", examples=["MAT-001"],
    )
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    category: MaterialCategory
    unit: Unit
    brand: str | None = Field(None, max_length=50)
    current_stock: int = Field(0, ge=0)
    minimum_stock: int = Field(0, ge=0)
    maximum_stock: int | None = Field(None, ge=0)
    last_purchase_price: float | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _check_stock_range(self):
        if self.maximum_stock is not None and self.maximum_stock < self.minimum_stock:
            raise ValueError("maximum_stock must not be lower than minimum_stock")
        return self


class MaterialUpdate(BaseModel):
    """Stock levels move through material-in bookings, never through this schema."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    category: MaterialCategory | None = None
    unit: Unit | None = None
    brand: str | None = Field(None, max_length=50)
    minimum_stock: int | None = Field(None, ge=0)
    maximum_stock: int | None = Field(None, ge=0)
    last_purchase_price: float | None = Field(None, ge=0)

    model_config = {"extra": "forbid"}


class MaterialResponse(BaseModel):
    id: str
    code: str
    name: str
    description: str | None
    category: MaterialCategory
    unit: Unit
    brand: str | None
    current_stock: int
    minimum_stock: int
    maximum_stock: int | None
    good_stock: int
    bad_stock: int
    last_purchase_price: float | None
    stock_status: StockStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

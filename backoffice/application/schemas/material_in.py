"""Pydantic DTOs for material purchases ("material in").

Line totals, the subtotal and the grand total are always recomputed on the
server; any value the client sends for them is ignored.
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from backoffice.domain.entities import StockType


class MaterialInItemCreate(BaseModel):
    material_id: str = Field(..., min_length=1, max_length=36)
    quantity: int = Field(..., gt=0)
    unit_price: float = Field(..., ge=0)
    stock_type: StockType = StockType.GOOD
    notes: str | None = Field(None, max_length=255)


class MaterialInCreate(BaseModel):
    supplier_id: str = Field(..., min_length=1, max_length=36)
    transaction_date: datetime | None = None
    invoice_no: str | None = Field(None, max_length=50)
    tax_percentage: float | None = Field(None, ge=0, le=100)
    total_tax: float | None = Field(None, ge=0)
    other_costs: float | None = Field(None, ge=0)
    notes: str | None = Field(None, max_length=500)
    created_by: str | None = Field(None, max_length=100)
    items: list[MaterialInItemCreate] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_tax(self):
        if self.tax_percentage is not None and self.total_tax is not None:
            raise ValueError("Send either tax_percentage or total_tax, not both")
        return self


class MaterialInUpdate(BaseModel):
    """Header-only update; items are fixed once their stock is booked."""

    transaction_date: datetime | None = None
    invoice_no: str | None = Field(None, max_length=50)
    total_tax: float | None = Field(None, ge=0)
    other_costs: float | None = Field(None, ge=0)
    notes: str | None = Field(None, max_length=500)

    model_config = {"extra": "forbid"}


class MaterialInItemResponse(BaseModel):
    id: str
    material_id: str
    material_code: str | None
    material_name: str | None
    quantity: int
    unit_price: float
    total_price: float
    stock_type: StockType
    stock_before: int
    stock_after: int
    notes: str | None

    model_config = {"from_attributes": True}


class MaterialInResponse(BaseModel):
    id: str
    transaction_no: str
    supplier_id: str
    supplier_name: str
    transaction_date: datetime
    invoice_no: str | None
    total_amount_before_tax: float
    total_tax: float | None
    other_costs: float | None
    total_amount: float
    notes: str | None
    created_by: str | None
    items: list[MaterialInItemResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

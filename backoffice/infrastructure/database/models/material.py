"""SQLAlchemy ORM models for materials and material purchases."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.infrastructure.database.base import Base

from .common import TimestampMixin


class MaterialModel(TimestampMixin, Base):
    """ORM model: maps to the 'materials' table."""

    __tablename__ = "materials"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    code: Mapped[str] = mapped_column(String(12), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    unit: Mapped[str] = mapped_column(String(10), nullable=False)
    brand: Mapped[str | None] = mapped_column(String(50), nullable=True)
    current_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    minimum_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    maximum_stock: Mapped[int | None] = mapped_column(Integer, nullable=True)
    good_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    bad_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_purchase_price: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<MaterialModel(id={self.id}, code='{self.code}')>"


class MaterialInModel(TimestampMixin, Base):
    """ORM model: maps to the 'material_ins' table."""

    __tablename__ = "material_ins"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    transaction_no: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    supplier_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("suppliers.id"), nullable=False, index=True
    )
    supplier_name: Mapped[str] = mapped_column(String(100), nullable=False)
    transaction_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    invoice_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    total_amount_before_tax: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    total_tax: Mapped[float | None] = mapped_column(Float, nullable=True)
    other_costs: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_amount: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[str | None] = mapped_column(String(100), nullable=True)

    items: Mapped[list["MaterialInItemModel"]] = relationship(
        back_populates="material_in", cascade="all, delete-orphan", lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<MaterialInModel(id={self.id}, no='{self.transaction_no}')>"


class MaterialInItemModel(Base):
    __tablename__ = "material_in_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    material_in_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("material_ins.id", ondelete="CASCADE"), nullable=False, index=True
    )
    material_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("materials.id"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, nullable=False)
    stock_type: Mapped[str] = mapped_column(String(10), nullable=False)
    stock_before: Mapped[int] = mapped_column(Integer, nullable=False)
    stock_after: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(String(255), nullable=True)

    material_in: Mapped[MaterialInModel] = relationship(back_populates="items")
    material: Mapped[MaterialModel] = relationship(lazy="selectin")

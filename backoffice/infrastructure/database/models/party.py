"""SQLAlchemy ORM models for suppliers and customers with their addresses/contacts."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.infrastructure.database.base import Base

from .common import TimestampMixin


class PartyColumnsMixin(TimestampMixin):
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    status_active: Mapped[str] = mapped_column(String(20), nullable=False)
    active_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    npwp_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    npwp_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    npwp_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    npwp_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class AddressColumnsMixin:
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    address_type: Mapped[str] = mapped_column(String(20), nullable=False)
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country_code: Mapped[str] = mapped_column(String(3), nullable=False)
    zipcode: Mapped[str | None] = mapped_column(String(5), nullable=True)
    province_code: Mapped[str | None] = mapped_column(String(13), nullable=True)
    regency_code: Mapped[str | None] = mapped_column(String(13), nullable=True)
    district_code: Mapped[str | None] = mapped_column(String(13), nullable=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class ContactColumnsMixin:
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    contact_type: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(14), nullable=False)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class SupplierModel(PartyColumnsMixin, Base):
    """ORM model: maps to the 'suppliers' table."""

    __tablename__ = "suppliers"

    supplier_type: Mapped[str] = mapped_column(String(20), nullable=False)

    addresses: Mapped[list["SupplierAddressModel"]] = relationship(
        back_populates="supplier", cascade="all, delete-orphan", lazy="selectin"
    )
    contacts: Mapped[list["SupplierContactModel"]] = relationship(
        back_populates="supplier", cascade="all, delete-orphan", lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<SupplierModel(id={self.id}, code='{self.code}')>"


class SupplierAddressModel(AddressColumnsMixin, Base):
    __tablename__ = "supplier_addresses"

    supplier_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    supplier: Mapped[SupplierModel] = relationship(back_populates="addresses")


class SupplierContactModel(ContactColumnsMixin, Base):
    __tablename__ = "supplier_contacts"

    supplier_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    supplier: Mapped[SupplierModel] = relationship(back_populates="contacts")


class CustomerModel(PartyColumnsMixin, Base):
    """ORM model: maps to the 'customers' table."""

    __tablename__ = "customers"

    customer_type: Mapped[str] = mapped_column(String(20), nullable=False)

    addresses: Mapped[list["CustomerAddressModel"]] = relationship(
        back_populates="customer", cascade="all, delete-orphan", lazy="selectin"
    )
    contacts: Mapped[list["CustomerContactModel"]] = relationship(
        back_populates="customer", cascade="all, delete-orphan", lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id}, code='{self.code}')>"


class CustomerAddressModel(AddressColumnsMixin, Base):
    __tablename__ = "customer_addresses"

    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    customer: Mapped[CustomerModel] = relationship(back_populates="addresses")


class CustomerContactModel(ContactColumnsMixin, Base):
    __tablename__ = "customer_contacts"

    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    customer: Mapped[CustomerModel] = relationship(back_populates="contacts")

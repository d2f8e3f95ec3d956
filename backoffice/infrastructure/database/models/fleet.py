"""SQLAlchemy ORM models for drivers, vehicles and employees."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.infrastructure.database.base import Base

from .common import TimestampMixin


class DriverModel(TimestampMixin, Base):
    __tablename__ = "drivers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    code: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(14), nullable=False)
    status_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    active_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class VehicleModel(TimestampMixin, Base):
    __tablename__ = "vehicles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    vehicle_number: Mapped[str] = mapped_column(String(15), unique=True, nullable=False)
    vehicle_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    vehicle_make: Mapped[str | None] = mapped_column(String(50), nullable=True)
    vehicle_year: Mapped[str | None] = mapped_column(String(4), nullable=True)


class EmployeeModel(TimestampMixin, Base):
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    nik: Mapped[str] = mapped_column(String(12), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    zipcode: Mapped[str] = mapped_column(String(5), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(14), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    active_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    resign_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    photo: Mapped[str | None] = mapped_column(String(255), nullable=True)

    employments: Mapped[list["EmploymentModel"]] = relationship(
        back_populates="employee",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="EmploymentModel.start_date.desc()",
    )


class EmploymentModel(Base):
    __tablename__ = "employments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    employee_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    division: Mapped[str] = mapped_column(String(100), nullable=False)

    employee: Mapped[EmployeeModel] = relationship(back_populates="employments")

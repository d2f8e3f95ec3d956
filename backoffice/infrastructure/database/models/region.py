"""SQLAlchemy ORM models for region reference data."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base


class ProvinceModel(Base):
    __tablename__ = "provinces"

    code: Mapped[str] = mapped_column(String(13), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class RegencyModel(Base):
    __tablename__ = "regencies"

    code: Mapped[str] = mapped_column(String(13), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    province_code: Mapped[str] = mapped_column(
        String(13), ForeignKey("provinces.code"), nullable=False, index=True
    )


class DistrictModel(Base):
    __tablename__ = "districts"

    code: Mapped[str] = mapped_column(String(13), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    regency_code: Mapped[str] = mapped_column(
        String(13), ForeignKey("regencies.code"), nullable=False, index=True
    )

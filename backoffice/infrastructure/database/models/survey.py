"""SQLAlchemy ORM models for surveys, survey items and status history."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.infrastructure.database.base import Base

from .common import TimestampMixin
from .party import CustomerModel


class SurveyModel(TimestampMixin, Base):
    """ORM model: maps to the 'surveys' table."""

    __tablename__ = "surveys"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    survey_no: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    survey_date: Mapped[date] = mapped_column(Date, nullable=False)
    work_date: Mapped[date] = mapped_column(Date, nullable=False)
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True
    )
    origin: Mapped[str] = mapped_column(String(255), nullable=False)
    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    cargo_type: Mapped[str] = mapped_column(String(20), nullable=False)
    shipment_type: Mapped[str] = mapped_column(String(20), nullable=False)
    shipment_detail: Mapped[str] = mapped_column(String(10), nullable=False)
    status_survey: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    customer: Mapped[CustomerModel] = relationship(lazy="selectin")
    items: Mapped[list["SurveyItemModel"]] = relationship(
        back_populates="survey", cascade="all, delete-orphan", lazy="selectin"
    )
    status_histories: Mapped[list["SurveyStatusHistoryModel"]] = relationship(
        back_populates="survey",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="SurveyStatusHistoryModel.changed_at.desc()",
    )

    def __repr__(self) -> str:
        return f"<SurveyModel(id={self.id}, no='{self.survey_no}')>"


class SurveyItemModel(Base):
    __tablename__ = "survey_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    survey_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    width: Mapped[float] = mapped_column(Float, nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    cbm: Mapped[float] = mapped_column(Float, nullable=False)
    note: Mapped[str | None] = mapped_column(String(255), nullable=True)

    survey: Mapped[SurveyModel] = relationship(back_populates="items")


class SurveyStatusHistoryModel(Base):
    __tablename__ = "survey_status_histories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    survey_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    changed_by: Mapped[str] = mapped_column(String(100), nullable=False)
    remarks: Mapped[str | None] = mapped_column(String(500), nullable=True)
    changed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    survey: Mapped[SurveyModel] = relationship(back_populates="status_histories")

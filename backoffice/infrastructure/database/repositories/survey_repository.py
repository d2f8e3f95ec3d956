"""Concrete repository implementation for Survey backed by SQLAlchemy."""

from datetime import date, datetime, time, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import SurveyRepository
from backoffice.domain.entities import (
    CargoType,
    Page,
    ShipmentDetail,
    ShipmentType,
    Survey,
    SurveyItem,
    SurveyStatus,
    SurveyStatusHistory,
)
from backoffice.infrastructure.database.models import (
    CustomerModel,
    SurveyItemModel,
    SurveyModel,
    SurveyStatusHistoryModel,
)

from .base import copy_attributes, loaded_or_none, paginate, search_clause, sync_children

_FIELDS = ("survey_date", "work_date", "customer_id", "origin", "destination")
_ITEM_FIELDS = ("name", "width", "length", "height", "quantity", "cbm", "note")


class SQLAlchemySurveyRepository(SurveyRepository):
    """Implements the SurveyRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Mapping ──────────────────────────────────────────────────────

    def _to_entity(self, model: SurveyModel) -> Survey:
        customer = loaded_or_none(model, "customer")
        survey = Survey(
            id=model.id,
            survey_no=model.survey_no,
            survey_date=model.survey_date,
            work_date=model.work_date,
            customer_id=model.customer_id,
            origin=model.origin,
            destination=model.destination,
            cargo_type=CargoType(model.cargo_type),
            shipment_type=ShipmentType(model.shipment_type),
            shipment_detail=ShipmentDetail(model.shipment_detail),
            status_survey=SurveyStatus(model.status_survey),
            customer_name=customer.name if customer is not None else None,
            items=[self._item_to_entity(i) for i in model.items],
            status_histories=[self._history_to_entity(h) for h in model.status_histories],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        return survey

    @staticmethod
    def _item_to_entity(model: SurveyItemModel) -> SurveyItem:
        item = SurveyItem(
            id=model.id,
            name=model.name,
            width=model.width,
            length=model.length,
            height=model.height,
            quantity=model.quantity,
        )
        copy_attributes(item, model, _ITEM_FIELDS)
        return item

    @staticmethod
    def _item_to_model(entity: SurveyItem) -> SurveyItemModel:
        model = SurveyItemModel(id=entity.id)
        copy_attributes(model, entity, _ITEM_FIELDS)
        return model

    @staticmethod
    def _apply_item(model: SurveyItemModel, entity: SurveyItem) -> None:
        copy_attributes(model, entity, _ITEM_FIELDS)

    @staticmethod
    def _history_to_entity(model: SurveyStatusHistoryModel) -> SurveyStatusHistory:
        return SurveyStatusHistory(
            id=model.id,
            status=SurveyStatus(model.status),
            changed_by=model.changed_by,
            remarks=model.remarks,
            changed_at=model.changed_at,
        )

    @staticmethod
    def _history_to_model(entity: SurveyStatusHistory) -> SurveyStatusHistoryModel:
        return SurveyStatusHistoryModel(
            id=entity.id,
            status=entity.status.value,
            changed_by=entity.changed_by,
            remarks=entity.remarks,
            changed_at=entity.changed_at,
        )

    def _to_model(self, entity: Survey) -> SurveyModel:
        model = SurveyModel(
            id=entity.id,
            survey_no=entity.survey_no,
            cargo_type=entity.cargo_type.value,
            shipment_type=entity.shipment_type.value,
            shipment_detail=entity.shipment_detail.value,
            status_survey=entity.status_survey.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        copy_attributes(model, entity, _FIELDS)
        model.items = [self._item_to_model(i) for i in entity.items]
        model.status_histories = [self._history_to_model(h) for h in entity.status_histories]
        return model

    # ── Queries ──────────────────────────────────────────────────────

    async def get_by_id(self, survey_id: str) -> Survey | None:
        result = await self._session.get(SurveyModel, survey_id)
        return self._to_entity(result) if result else None

    async def get_by_ids(self, survey_ids: list[str]) -> list[Survey]:
        if not survey_ids:
            return []
        stmt = (
            select(SurveyModel)
            .where(SurveyModel.id.in_(survey_ids))
            .order_by(SurveyModel.survey_no)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(
        self,
        *,
        search: str | None = None,
        status: SurveyStatus | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Survey]:
        stmt = select(SurveyModel)
        clause = search_clause(
            search, SurveyModel.survey_no, SurveyModel.origin, SurveyModel.destination
        )
        if clause is not None:
            customer_clause = search_clause(search, CustomerModel.name)
            stmt = stmt.where(clause | SurveyModel.customer.has(customer_clause))
        if status is not None:
            stmt = stmt.where(SurveyModel.status_survey == status.value)
        if start_date is not None:
            since = datetime.combine(start_date, time.min, tzinfo=timezone.utc)
            stmt = stmt.where(SurveyModel.created_at >= since)
        if end_date is not None:
            until = datetime.combine(end_date, time.max, tzinfo=timezone.utc)
            stmt = stmt.where(SurveyModel.created_at <= until)
        stmt = stmt.order_by(SurveyModel.created_at.desc(), SurveyModel.survey_no.desc())
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def get_last_survey_no(self, prefix: str) -> str | None:
        stmt = (
            select(SurveyModel.survey_no)
            .where(SurveyModel.survey_no.like(f"{prefix}%"))
            .order_by(SurveyModel.survey_no.desc())
            .limit(1)
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def get_status_history(self, survey_id: str) -> list[SurveyStatusHistory]:
        stmt = (
            select(SurveyStatusHistoryModel)
            .where(SurveyStatusHistoryModel.survey_id == survey_id)
            .order_by(SurveyStatusHistoryModel.changed_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._history_to_entity(row) for row in result.scalars().all()]

    async def count_by_customer(self, customer_id: str) -> int:
        stmt = select(func.count()).where(SurveyModel.customer_id == customer_id)
        return (await self._session.execute(stmt)).scalar_one()

    async def count(
        self,
        *,
        status: SurveyStatus | None = None,
        created_since: datetime | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(SurveyModel)
        if status is not None:
            stmt = stmt.where(SurveyModel.status_survey == status.value)
        if created_since is not None:
            stmt = stmt.where(SurveyModel.created_at >= created_since)
        return (await self._session.execute(stmt)).scalar_one()

    # ── Mutations ────────────────────────────────────────────────────

    async def create(self, survey: Survey) -> Survey:
        model = self._to_model(survey)
        self._session.add(model)
        await self._session.flush()
        created = self._to_entity(model)
        created.customer_name = created.customer_name or survey.customer_name
        return created

    async def update(self, survey: Survey) -> Survey:
        model = await self._session.get(SurveyModel, survey.id)
        if model is None:
            raise ValueError(f"Survey {survey.id} not found in database")
        copy_attributes(model, survey, _FIELDS)
        model.cargo_type = survey.cargo_type.value
        model.shipment_type = survey.shipment_type.value
        model.shipment_detail = survey.shipment_detail.value
        model.status_survey = survey.status_survey.value
        model.updated_at = survey.updated_at
        sync_children(model.items, survey.items, self._item_to_model, self._apply_item)

        # History is append-only and kept newest first.
        known = {h.id for h in model.status_histories}
        fresh = [h for h in survey.status_histories if h.id not in known]
        for history in reversed(fresh):
            model.status_histories.insert(0, self._history_to_model(history))

        await self._session.flush()
        updated = self._to_entity(model)
        updated.customer_name = survey.customer_name or updated.customer_name
        return updated

    async def delete(self, survey_id: str) -> bool:
        model = await self._session.get(SurveyModel, survey_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

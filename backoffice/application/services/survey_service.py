"""Application service for cargo surveys, their items and status trail."""

import logging
from datetime import date, datetime, time, timezone

from backoffice.application.interfaces import CustomerRepository, SurveyRepository
from backoffice.application.schemas.survey import (
    SurveyCreate,
    SurveyItemInput,
    SurveyStatsResponse,
    SurveyStatusBreakdown,
    SurveyStatusUpdate,
    SurveyUpdate,
)
from backoffice.domain import calculations
from backoffice.domain.entities import (
    Customer,
    Page,
    Survey,
    SurveyItem,
    SurveyStatus,
    SurveyStatusHistory,
)
from backoffice.domain.entities.base import utcnow
from backoffice.domain.exceptions import EntityNotFoundError
from backoffice.domain.numbering import next_survey_no, survey_prefix

logger = logging.getLogger(__name__)


def _build_items(payloads: list[SurveyItemInput]) -> list[SurveyItem]:
    return [
        SurveyItem(
            cbm=calculations.cbm(p.width, p.length, p.height, p.quantity),
            **p.model_dump(),
        )
        for p in payloads
    ]


class SurveyService:

    def __init__(self, repository: SurveyRepository, customer_repository: CustomerRepository):
        self._repository = repository
        self._customers = customer_repository

    async def get_survey(self, survey_id: str) -> Survey:
        survey = await self._repository.get_by_id(survey_id)
        if survey is None:
            raise EntityNotFoundError("Survey", survey_id)
        return survey

    async def get_surveys(self, survey_ids: list[str]) -> list[Survey]:
        return await self._repository.get_by_ids(survey_ids)

    async def list_surveys(
        self,
        *,
        search: str | None = None,
        status: SurveyStatus | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Survey]:
        return await self._repository.get_all(
            search=search,
            status=status,
            start_date=start_date,
            end_date=end_date,
            page=page,
            limit=limit,
        )

    async def create_survey(self, data: SurveyCreate) -> Survey:
        customer = await self._get_customer(data.customer_id)
        today = utcnow().date()
        last = await self._repository.get_last_survey_no(
            survey_prefix(data.shipment_type, data.shipment_detail, today)
        )
        survey = Survey(
            survey_no=next_survey_no(data.shipment_type, data.shipment_detail, last, today),
            customer_name=customer.name,
            items=_build_items(data.items),
            **data.model_dump(exclude={"items", "created_by"}),
        )
        survey.change_status(SurveyStatus.ONPROGRESS, data.created_by, "Survey created")
        created = await self._repository.create(survey)
        logger.info(
            "Created survey %s for %s (%s m3)",
            created.survey_no,
            customer.code,
            calculations.format_cbm(created.total_cbm),
        )
        return created

    async def update_survey(self, survey_id: str, data: SurveyUpdate) -> Survey:
        survey = await self.get_survey(survey_id)
        changes = data.model_dump(exclude_unset=True, exclude={"items"})
        if changes.get("customer_id") and changes["customer_id"] != survey.customer_id:
            customer = await self._get_customer(changes["customer_id"])
            changes["customer_name"] = customer.name
        if data.items is not None:
            changes["items"] = _build_items(data.items)
        survey.update(**changes)
        updated = await self._repository.update(survey)
        logger.info("Updated survey %s", updated.survey_no)
        return updated

    async def change_status(self, survey_id: str, data: SurveyStatusUpdate) -> Survey:
        survey = await self.get_survey(survey_id)
        previous = survey.status_survey
        survey.change_status(data.status, data.changed_by, data.remarks)
        updated = await self._repository.update(survey)
        logger.info(
            "Survey %s status %s -> %s by %s",
            survey.survey_no,
            previous.value,
            data.status.value,
            data.changed_by,
        )
        return updated

    async def get_status_history(self, survey_id: str) -> list[SurveyStatusHistory]:
        await self.get_survey(survey_id)
        return await self._repository.get_status_history(survey_id)

    async def get_stats(self, now: datetime | None = None) -> SurveyStatsResponse:
        now = now or utcnow()
        start_of_day = datetime.combine(now.date(), time.min, tzinfo=timezone.utc)
        start_of_month = start_of_day.replace(day=1)
        return SurveyStatsResponse(
            total_surveys=await self._repository.count(),
            today_surveys=await self._repository.count(created_since=start_of_day),
            this_month_surveys=await self._repository.count(created_since=start_of_month),
            status_breakdown=SurveyStatusBreakdown(
                on_progress=await self._repository.count(status=SurveyStatus.ONPROGRESS),
                approved=await self._repository.count(status=SurveyStatus.APPROVED),
                rejected=await self._repository.count(status=SurveyStatus.REJECT),
            ),
        )

    async def delete_survey(self, survey_id: str) -> bool:
        survey = await self.get_survey(survey_id)
        deleted = await self._repository.delete(survey_id)
        logger.info("Deleted survey %s", survey.survey_no)
        return deleted

    async def _get_customer(self, customer_id: str) -> Customer:
        customer = await self._customers.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)
        return customer

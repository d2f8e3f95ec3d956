"""Cargo survey endpoints, including the status workflow and dashboard stats."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    MessageResponse,
    MutationResponse,
    PaginatedResponse,
    SurveyCreate,
    SurveyResponse,
    SurveyStatsResponse,
    SurveyStatusHistoryResponse,
    SurveyStatusUpdate,
    SurveyUpdate,
)
from backoffice.application.services import SurveyService
from backoffice.domain.entities import Survey, SurveyStatus
from backoffice.infrastructure.dependencies import get_survey_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import SURVEY_EXPORT

router = APIRouter(prefix="/surveys", tags=["Surveys"])


def _to_response(survey: Survey) -> SurveyResponse:
    return SurveyResponse.model_validate(survey, from_attributes=True)


@router.get("", response_model=PaginatedResponse[SurveyResponse])
async def list_surveys(
    search: str | None = Query(None, description="Survey no, origin, destination or customer"),
    status_survey: SurveyStatus | None = Query(None, description="Filter by status"),
    start_date: date | None = Query(None, description="Created on or after"),
    end_date: date | None = Query(None, description="Created on or before"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: SurveyService = Depends(get_survey_service),
) -> PaginatedResponse[SurveyResponse]:
    result = await service.list_surveys(
        search=search,
        status=status_survey,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    return PaginatedResponse[SurveyResponse].from_page(result, _to_response)


@router.get("/export")
async def export_surveys(
    ids: list[str] = Query(..., description="Selected survey IDs"),
    service: SurveyService = Depends(get_survey_service),
) -> Response:
    surveys = await service.get_surveys(ids)
    return csv_attachment(SURVEY_EXPORT, [_to_response(s) for s in surveys])


@router.get("/stats", response_model=SurveyStatsResponse)
async def survey_stats(
    service: SurveyService = Depends(get_survey_service),
) -> SurveyStatsResponse:
    """Totals for today, this month and per status."""
    return await service.get_stats()


@router.get("/{survey_id}", response_model=SurveyResponse)
async def get_survey(
    survey_id: str,
    service: SurveyService = Depends(get_survey_service),
) -> SurveyResponse:
    try:
        survey = await service.get_survey(survey_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(survey)


@router.get("/{survey_id}/status-history", response_model=list[SurveyStatusHistoryResponse])
async def get_status_history(
    survey_id: str,
    service: SurveyService = Depends(get_survey_service),
) -> list[SurveyStatusHistoryResponse]:
    """Status changes, newest first."""
    try:
        history = await service.get_status_history(survey_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return [
        SurveyStatusHistoryResponse.model_validate(h, from_attributes=True) for h in history
    ]


@router.post(
    "",
    response_model=MutationResponse[SurveyResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_survey(
    data: SurveyCreate,
    service: SurveyService = Depends(get_survey_service),
) -> MutationResponse[SurveyResponse]:
    """Create a survey; the number and every CBM value are computed here."""
    try:
        survey = await service.create_survey(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[SurveyResponse](
        message="Survey created successfully", data=_to_response(survey)
    )


@router.put("/{survey_id}", response_model=MutationResponse[SurveyResponse])
async def update_survey(
    survey_id: str,
    data: SurveyUpdate,
    service: SurveyService = Depends(get_survey_service),
) -> MutationResponse[SurveyResponse]:
    try:
        survey = await service.update_survey(survey_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[SurveyResponse](
        message="Survey updated successfully", data=_to_response(survey)
    )


@router.patch("/{survey_id}/status", response_model=MutationResponse[SurveyResponse])
async def change_survey_status(
    survey_id: str,
    data: SurveyStatusUpdate,
    service: SurveyService = Depends(get_survey_service),
) -> MutationResponse[SurveyResponse]:
    """Move a survey to a new status and record the change in its history."""
    try:
        survey = await service.change_status(survey_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[SurveyResponse](
        message="Survey status updated successfully", data=_to_response(survey)
    )


@router.delete("/{survey_id}", response_model=MessageResponse)
async def delete_survey(
    survey_id: str,
    service: SurveyService = Depends(get_survey_service),
) -> MessageResponse:
    try:
        await service.delete_survey(survey_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Survey deleted successfully")

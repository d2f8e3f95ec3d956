"""Driver CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    DriverCreate,
    DriverResponse,
    DriverUpdate,
    MessageResponse,
    MutationResponse,
    PaginatedResponse,
)
from backoffice.application.services import DriverService
from backoffice.domain.entities import Driver, Gender
from backoffice.infrastructure.dependencies import get_driver_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import DRIVER_EXPORT

router = APIRouter(prefix="/drivers", tags=["Drivers"])


def _to_response(driver: Driver) -> DriverResponse:
    return DriverResponse.model_validate(driver, from_attributes=True)


@router.get("", response_model=PaginatedResponse[DriverResponse])
async def list_drivers(
    search: str | None = Query(None, description="Code, name, city or phone"),
    gender: Gender | None = Query(None),
    status_active: bool | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: DriverService = Depends(get_driver_service),
) -> PaginatedResponse[DriverResponse]:
    result = await service.list_drivers(
        search=search, gender=gender, status_active=status_active, page=page, limit=limit
    )
    return PaginatedResponse[DriverResponse].from_page(result, _to_response)


@router.get("/export")
async def export_drivers(
    ids: list[str] = Query(..., description="Selected driver IDs"),
    service: DriverService = Depends(get_driver_service),
) -> Response:
    drivers = await service.get_drivers(ids)
    return csv_attachment(DRIVER_EXPORT, [_to_response(d) for d in drivers])


@router.get("/{driver_id}", response_model=DriverResponse)
async def get_driver(
    driver_id: str,
    service: DriverService = Depends(get_driver_service),
) -> DriverResponse:
    try:
        driver = await service.get_driver(driver_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(driver)


@router.post(
    "",
    response_model=MutationResponse[DriverResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_driver(
    data: DriverCreate,
    service: DriverService = Depends(get_driver_service),
) -> MutationResponse[DriverResponse]:
    try:
        driver = await service.create_driver(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[DriverResponse](
        message="Driver created successfully", data=_to_response(driver)
    )


@router.put("/{driver_id}", response_model=MutationResponse[DriverResponse])
async def update_driver(
    driver_id: str,
    data: DriverUpdate,
    service: DriverService = Depends(get_driver_service),
) -> MutationResponse[DriverResponse]:
    try:
        driver = await service.update_driver(driver_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[DriverResponse](
        message="Driver updated successfully", data=_to_response(driver)
    )


@router.delete("/{driver_id}", response_model=MessageResponse)
async def delete_driver(
    driver_id: str,
    service: DriverService = Depends(get_driver_service),
) -> MessageResponse:
    try:
        await service.delete_driver(driver_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Driver deleted successfully")

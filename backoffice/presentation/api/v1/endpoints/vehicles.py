"""Vehicle CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    MessageResponse,
    MutationResponse,
    PaginatedResponse,
    VehicleCreate,
    VehicleResponse,
    VehicleUpdate,
)
from backoffice.application.services import VehicleService
from backoffice.domain.entities import Vehicle, VehicleType
from backoffice.infrastructure.dependencies import get_vehicle_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import VEHICLE_EXPORT

router = APIRouter(prefix="/vehicles", tags=["Vehicles"])


def _to_response(vehicle: Vehicle) -> VehicleResponse:
    return VehicleResponse.model_validate(vehicle, from_attributes=True)


@router.get("", response_model=PaginatedResponse[VehicleResponse])
async def list_vehicles(
    search: str | None = Query(None, description="Number, make or type"),
    vehicle_type: VehicleType | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: VehicleService = Depends(get_vehicle_service),
) -> PaginatedResponse[VehicleResponse]:
    result = await service.list_vehicles(
        search=search, vehicle_type=vehicle_type, page=page, limit=limit
    )
    return PaginatedResponse[VehicleResponse].from_page(result, _to_response)


@router.get("/export")
async def export_vehicles(
    ids: list[str] = Query(..., description="Selected vehicle IDs"),
    service: VehicleService = Depends(get_vehicle_service),
) -> Response:
    vehicles = await service.get_vehicles(ids)
    return csv_attachment(VEHICLE_EXPORT, [_to_response(v) for v in vehicles])


@router.get("/{vehicle_id}", response_model=VehicleResponse)
async def get_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    try:
        vehicle = await service.get_vehicle(vehicle_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(vehicle)


@router.post(
    "",
    response_model=MutationResponse[VehicleResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_vehicle(
    data: VehicleCreate,
    service: VehicleService = Depends(get_vehicle_service),
) -> MutationResponse[VehicleResponse]:
    try:
        vehicle = await service.create_vehicle(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[VehicleResponse](
        message="Vehicle created successfully", data=_to_response(vehicle)
    )


@router.put("/{vehicle_id}", response_model=MutationResponse[VehicleResponse])
async def update_vehicle(
    vehicle_id: str,
    data: VehicleUpdate,
    service: VehicleService = Depends(get_vehicle_service),
) -> MutationResponse[VehicleResponse]:
    try:
        vehicle = await service.update_vehicle(vehicle_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[VehicleResponse](
        message="Vehicle updated successfully", data=_to_response(vehicle)
    )


@router.delete("/{vehicle_id}", response_model=MessageResponse)
async def delete_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> MessageResponse:
    try:
        await service.delete_vehicle(vehicle_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Vehicle deleted successfully")

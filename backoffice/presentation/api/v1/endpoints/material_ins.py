"""Material purchase ("material in") endpoints.

Creating a purchase books stock on every referenced material; deleting one
reverses those bookings.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    MaterialInCreate,
    MaterialInResponse,
    MaterialInUpdate,
    MessageResponse,
    MutationResponse,
    NextCodeResponse,
    PaginatedResponse,
)
from backoffice.application.services import MaterialInService
from backoffice.domain.entities import MaterialIn
from backoffice.infrastructure.dependencies import get_material_in_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import MATERIAL_IN_EXPORT

router = APIRouter(prefix="/material-ins", tags=["Material In"])


def _to_response(material_in: MaterialIn) -> MaterialInResponse:
    return MaterialInResponse.model_validate(material_in, from_attributes=True)


@router.get("", response_model=PaginatedResponse[MaterialInResponse])
async def list_material_ins(
    search: str | None = Query(None, description="Transaction no, supplier or invoice"),
    supplier_id: str | None = Query(None, description="Filter by supplier ID"),
    start_date: date | None = Query(None, description="Created on or after"),
    end_date: date | None = Query(None, description="Created on or before"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: MaterialInService = Depends(get_material_in_service),
) -> PaginatedResponse[MaterialInResponse]:
    result = await service.list_material_ins(
        search=search,
        supplier_id=supplier_id,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    return PaginatedResponse[MaterialInResponse].from_page(result, _to_response)


@router.get("/export")
async def export_material_ins(
    ids: list[str] = Query(..., description="Selected purchase IDs"),
    service: MaterialInService = Depends(get_material_in_service),
) -> Response:
    material_ins = await service.get_material_ins(ids)
    return csv_attachment(MATERIAL_IN_EXPORT, [_to_response(m) for m in material_ins])


@router.get("/next-number", response_model=NextCodeResponse)
async def next_transaction_no(
    service: MaterialInService = Depends(get_material_in_service),
) -> NextCodeResponse:
    """Preview the transaction number for a purchase created today."""
    return NextCodeResponse(code=await service.next_transaction_no())


@router.get("/{material_in_id}", response_model=MaterialInResponse)
async def get_material_in(
    material_in_id: str,
    service: MaterialInService = Depends(get_material_in_service),
) -> MaterialInResponse:
    try:
        material_in = await service.get_material_in(material_in_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(material_in)


@router.post(
    "",
    response_model=MutationResponse[MaterialInResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_material_in(
    data: MaterialInCreate,
    service: MaterialInService = Depends(get_material_in_service),
) -> MutationResponse[MaterialInResponse]:
    """Record a purchase; totals are computed here, never taken from the client."""
    try:
        material_in = await service.create_material_in(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[MaterialInResponse](
        message="Material in created successfully", data=_to_response(material_in)
    )


@router.put("/{material_in_id}", response_model=MutationResponse[MaterialInResponse])
async def update_material_in(
    material_in_id: str,
    data: MaterialInUpdate,
    service: MaterialInService = Depends(get_material_in_service),
) -> MutationResponse[MaterialInResponse]:
    try:
        material_in = await service.update_material_in(material_in_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[MaterialInResponse](
        message="Material in updated successfully", data=_to_response(material_in)
    )


@router.delete("/{material_in_id}", response_model=MessageResponse)
async def delete_material_in(
    material_in_id: str,
    service: MaterialInService = Depends(get_material_in_service),
) -> MessageResponse:
    """Delete a purchase and reverse its stock bookings."""
    try:
        await service.delete_material_in(material_in_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Material in deleted successfully")

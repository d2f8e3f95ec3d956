"""Supplier CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    MessageResponse,
    MutationResponse,
    NextCodeResponse,
    PaginatedResponse,
    SupplierCreate,
    SupplierResponse,
    SupplierUpdate,
)
from backoffice.application.services import SupplierService
from backoffice.domain.entities import StatusActive, Supplier, SupplierType
from backoffice.infrastructure.dependencies import get_supplier_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import SUPPLIER_EXPORT

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


def _to_response(supplier: Supplier) -> SupplierResponse:
    return SupplierResponse.model_validate(supplier, from_attributes=True)


@router.get("", response_model=PaginatedResponse[SupplierResponse])
async def list_suppliers(
    search: str | None = Query(None, description="Name, code, NPWP, contact or address"),
    supplier_type: SupplierType | None = Query(None, description="Filter by supplier type"),
    status_active: StatusActive | None = Query(None, description="Filter by status"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: SupplierService = Depends(get_supplier_service),
) -> PaginatedResponse[SupplierResponse]:
    """Retrieve a filtered, paginated list of suppliers."""
    result = await service.list_suppliers(
        search=search,
        supplier_type=supplier_type,
        status_active=status_active,
        page=page,
        limit=limit,
    )
    return PaginatedResponse[SupplierResponse].from_page(result, _to_response)


@router.get("/export")
async def export_suppliers(
    ids: list[str] = Query(..., description="Selected supplier IDs"),
    service: SupplierService = Depends(get_supplier_service),
) -> Response:
    """Download the selected suppliers as CSV."""
    suppliers = await service.get_suppliers(ids)
    return csv_attachment(SUPPLIER_EXPORT, [_to_response(s) for s in suppliers])


@router.get("/next-code", response_model=NextCodeResponse)
async def next_supplier_code(
    service: SupplierService = Depends(get_supplier_service),
) -> NextCodeResponse:
    """Preview the code the next created supplier will receive."""
    return NextCodeResponse(code=await service.next_code())


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: str,
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierResponse:
    try:
        supplier = await service.get_supplier(supplier_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(supplier)


@router.post(
    "",
    response_model=MutationResponse[SupplierResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_supplier(
    data: SupplierCreate,
    service: SupplierService = Depends(get_supplier_service),
) -> MutationResponse[SupplierResponse]:
    """Create a supplier; its code is assigned by the server."""
    try:
        supplier = await service.create_supplier(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[SupplierResponse](
        message="Supplier created successfully", data=_to_response(supplier)
    )


@router.put("/{supplier_id}", response_model=MutationResponse[SupplierResponse])
async def update_supplier(
    supplier_id: str,
    data: SupplierUpdate,
    service: SupplierService = Depends(get_supplier_service),
) -> MutationResponse[SupplierResponse]:
    """Partially update a supplier and sync its addresses and contacts."""
    try:
        supplier = await service.update_supplier(supplier_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[SupplierResponse](
        message="Supplier updated successfully", data=_to_response(supplier)
    )


@router.delete("/{supplier_id}", response_model=MessageResponse)
async def delete_supplier(
    supplier_id: str,
    service: SupplierService = Depends(get_supplier_service),
) -> MessageResponse:
    """Delete a supplier that no purchase refers to."""
    try:
        await service.delete_supplier(supplier_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Supplier deleted successfully")

"""Material master-data endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    MaterialCreate,
    MaterialResponse,
    MaterialUpdate,
    MessageResponse,
    MutationResponse,
    PaginatedResponse,
)
from backoffice.application.services import MaterialService
from backoffice.domain.entities import Material, MaterialCategory
from backoffice.infrastructure.dependencies import get_material_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import MATERIAL_EXPORT

router = APIRouter(prefix="/materials", tags=["Materials"])


def _to_response(material: Material) -> MaterialResponse:
    return MaterialResponse.model_validate(material, from_attributes=True)


@router.get("", response_model=PaginatedResponse[MaterialResponse])
async def list_materials(
    search: str | None = Query(None, description="Code, name, description, category or brand"),
    category: MaterialCategory | None = Query(None, description="Filter by category"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: MaterialService = Depends(get_material_service),
) -> PaginatedResponse[MaterialResponse]:
    result = await service.list_materials(
        search=search, category=category, page=page, limit=limit
    )
    return PaginatedResponse[MaterialResponse].from_page(result, _to_response)


@router.get("/export")
async def export_materials(
    ids: list[str] = Query(..., description="Selected material IDs"),
    service: MaterialService = Depends(get_material_service),
) -> Response:
    materials = await service.get_materials(ids)
    return csv_attachment(MATERIAL_EXPORT, [_to_response(m) for m in materials])


@router.get("/{material_id}", response_model=MaterialResponse)
async def get_material(
    material_id: str,
    service: MaterialService = Depends(get_material_service),
) -> MaterialResponse:
    try:
        material = await service.get_material(material_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(material)


@router.post(
    "",
    response_model=MutationResponse[MaterialResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_material(
    data: MaterialCreate,
    service: MaterialService = Depends(get_material_service),
) -> MutationResponse[MaterialResponse]:
    """Create a material; 409 when the code is taken."""
    try:
        material = await service.create_material(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[MaterialResponse](
        message="Material created successfully", data=_to_response(material)
    )


@router.put("/{material_id}", response_model=MutationResponse[MaterialResponse])
async def update_material(
    material_id: str,
    data: MaterialUpdate,
    service: MaterialService = Depends(get_material_service),
) -> MutationResponse[MaterialResponse]:
    """Update descriptive fields and stock limits. Stock levels only move through purchases."""
    try:
        material = await service.update_material(material_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[MaterialResponse](
        message="Material updated successfully", data=_to_response(material)
    )


@router.delete("/{material_id}", response_model=MessageResponse)
async def delete_material(
    material_id: str,
    service: MaterialService = Depends(get_material_service),
) -> MessageResponse:
    try:
        await service.delete_material(material_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Material deleted successfully")

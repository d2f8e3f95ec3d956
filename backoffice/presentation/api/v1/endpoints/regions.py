"""Province, regency and district reference-data endpoints.

Regions are addressed by their administrative code. Regencies filter by
``province_code`` and districts by ``regency_code`` so address forms can
cascade.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    BulkResponse,
    DistrictCreate,
    DistrictResponse,
    DistrictUpdate,
    MessageResponse,
    MutationResponse,
    PaginatedResponse,
    ProvinceCreate,
    ProvinceResponse,
    ProvinceUpdate,
    RegencyCreate,
    RegencyResponse,
    RegencyUpdate,
)
from backoffice.application.services import RegionService
from backoffice.infrastructure.dependencies import get_region_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import DISTRICT_EXPORT, PROVINCE_EXPORT, REGENCY_EXPORT

router = APIRouter(tags=["Regions"])


def _province(p) -> ProvinceResponse:
    return ProvinceResponse.model_validate(p, from_attributes=True)


def _regency(r) -> RegencyResponse:
    return RegencyResponse.model_validate(r, from_attributes=True)


def _district(d) -> DistrictResponse:
    return DistrictResponse.model_validate(d, from_attributes=True)


# ── Provinces ────────────────────────────────────────────────────────


@router.get("/provinces", response_model=PaginatedResponse[ProvinceResponse])
async def list_provinces(
    search: str | None = Query(None, description="Code or name"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: RegionService = Depends(get_region_service),
) -> PaginatedResponse[ProvinceResponse]:
    result = await service.list_provinces(search=search, page=page, limit=limit)
    return PaginatedResponse[ProvinceResponse].from_page(result, _province)


@router.get("/provinces/export")
async def export_provinces(
    ids: list[str] = Query(..., description="Selected province codes"),
    service: RegionService = Depends(get_region_service),
) -> Response:
    provinces = await service.get_provinces(ids)
    return csv_attachment(PROVINCE_EXPORT, [_province(p) for p in provinces])


@router.post("/provinces/bulk", response_model=BulkResponse)
async def bulk_upsert_provinces(
    rows: list[ProvinceCreate],
    service: RegionService = Depends(get_region_service),
) -> BulkResponse:
    """Insert or update provinces by code."""
    try:
        count = await service.bulk_upsert_provinces(rows)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return BulkResponse(message=f"{count} province(s) uploaded successfully", count=count)


@router.get("/provinces/{code}", response_model=ProvinceResponse)
async def get_province(
    code: str,
    service: RegionService = Depends(get_region_service),
) -> ProvinceResponse:
    try:
        province = await service.get_province(code)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _province(province)


@router.post(
    "/provinces",
    response_model=MutationResponse[ProvinceResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_province(
    data: ProvinceCreate,
    service: RegionService = Depends(get_region_service),
) -> MutationResponse[ProvinceResponse]:
    try:
        province = await service.create_province(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[ProvinceResponse](
        message="Province created successfully", data=_province(province)
    )


@router.put("/provinces/{code}", response_model=MutationResponse[ProvinceResponse])
async def update_province(
    code: str,
    data: ProvinceUpdate,
    service: RegionService = Depends(get_region_service),
) -> MutationResponse[ProvinceResponse]:
    try:
        province = await service.update_province(code, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[ProvinceResponse](
        message="Province updated successfully", data=_province(province)
    )


@router.delete("/provinces/{code}", response_model=MessageResponse)
async def delete_province(
    code: str,
    service: RegionService = Depends(get_region_service),
) -> MessageResponse:
    """Delete a province that has no regencies."""
    try:
        await service.delete_province(code)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Province deleted successfully")


# ── Regencies ────────────────────────────────────────────────────────


@router.get("/regencies", response_model=PaginatedResponse[RegencyResponse])
async def list_regencies(
    search: str | None = Query(None, description="Code or name"),
    province_code: str | None = Query(None, description="Only regencies of this province"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: RegionService = Depends(get_region_service),
) -> PaginatedResponse[RegencyResponse]:
    result = await service.list_regencies(
        search=search, province_code=province_code, page=page, limit=limit
    )
    return PaginatedResponse[RegencyResponse].from_page(result, _regency)


@router.get("/regencies/export")
async def export_regencies(
    ids: list[str] = Query(..., description="Selected regency codes"),
    service: RegionService = Depends(get_region_service),
) -> Response:
    regencies = await service.get_regencies(ids)
    return csv_attachment(REGENCY_EXPORT, [_regency(r) for r in regencies])


@router.post("/regencies/bulk", response_model=BulkResponse)
async def bulk_upsert_regencies(
    rows: list[RegencyCreate],
    service: RegionService = Depends(get_region_service),
) -> BulkResponse:
    """Insert or update regencies by code; every province must already exist."""
    try:
        count = await service.bulk_upsert_regencies(rows)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return BulkResponse(message=f"{count} regency(ies) uploaded successfully", count=count)


@router.get("/regencies/{code}", response_model=RegencyResponse)
async def get_regency(
    code: str,
    service: RegionService = Depends(get_region_service),
) -> RegencyResponse:
    try:
        regency = await service.get_regency(code)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _regency(regency)


@router.post(
    "/regencies",
    response_model=MutationResponse[RegencyResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_regency(
    data: RegencyCreate,
    service: RegionService = Depends(get_region_service),
) -> MutationResponse[RegencyResponse]:
    try:
        regency = await service.create_regency(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[RegencyResponse](
        message="Regency created successfully", data=_regency(regency)
    )


@router.put("/regencies/{code}", response_model=MutationResponse[RegencyResponse])
async def update_regency(
    code: str,
    data: RegencyUpdate,
    service: RegionService = Depends(get_region_service),
) -> MutationResponse[RegencyResponse]:
    try:
        regency = await service.update_regency(code, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[RegencyResponse](
        message="Regency updated successfully", data=_regency(regency)
    )


@router.delete("/regencies/{code}", response_model=MessageResponse)
async def delete_regency(
    code: str,
    service: RegionService = Depends(get_region_service),
) -> MessageResponse:
    """Delete a regency that has no districts."""
    try:
        await service.delete_regency(code)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Regency deleted successfully")


# ── Districts ────────────────────────────────────────────────────────


@router.get("/districts", response_model=PaginatedResponse[DistrictResponse])
async def list_districts(
    search: str | None = Query(None, description="Code or name"),
    regency_code: str | None = Query(None, description="Only districts of this regency"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: RegionService = Depends(get_region_service),
) -> PaginatedResponse[DistrictResponse]:
    result = await service.list_districts(
        search=search, regency_code=regency_code, page=page, limit=limit
    )
    return PaginatedResponse[DistrictResponse].from_page(result, _district)


@router.get("/districts/export")
async def export_districts(
    ids: list[str] = Query(..., description="Selected district codes"),
    service: RegionService = Depends(get_region_service),
) -> Response:
    districts = await service.get_districts(ids)
    return csv_attachment(DISTRICT_EXPORT, [_district(d) for d in districts])


@router.post("/districts/bulk", response_model=BulkResponse)
async def bulk_upsert_districts(
    rows: list[DistrictCreate],
    service: RegionService = Depends(get_region_service),
) -> BulkResponse:
    """Insert or update districts by code; every regency must already exist."""
    try:
        count = await service.bulk_upsert_districts(rows)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return BulkResponse(message=f"{count} district(s) uploaded successfully", count=count)


@router.get("/districts/{code}", response_model=DistrictResponse)
async def get_district(
    code: str,
    service: RegionService = Depends(get_region_service),
) -> DistrictResponse:
    try:
        district = await service.get_district(code)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _district(district)


@router.post(
    "/districts",
    response_model=MutationResponse[DistrictResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_district(
    data: DistrictCreate,
    service: RegionService = Depends(get_region_service),
) -> MutationResponse[DistrictResponse]:
    try:
        district = await service.create_district(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[DistrictResponse](
        message="District created successfully", data=_district(district)
    )


@router.put("/districts/{code}", response_model=MutationResponse[DistrictResponse])
async def update_district(
    code: str,
    data: DistrictUpdate,
    service: RegionService = Depends(get_region_service),
) -> MutationResponse[DistrictResponse]:
    try:
        district = await service.update_district(code, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[DistrictResponse](
        message="District updated successfully", data=_district(district)
    )


@router.delete("/districts/{code}", response_model=MessageResponse)
async def delete_district(
    code: str,
    service: RegionService = Depends(get_region_service),
) -> MessageResponse:
    try:
        await service.delete_district(code)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="District deleted successfully")

"""Application service for province / regency / district reference data.

Regions are keyed by their official code. Bulk uploads upsert by code, and a
parent cannot be deleted while children still point at it.
"""

import logging

from backoffice.application.interfaces import RegionRepository
from backoffice.application.schemas.region import (
    DistrictCreate,
    DistrictUpdate,
    ProvinceCreate,
    ProvinceUpdate,
    RegencyCreate,
    RegencyUpdate,
)
from backoffice.domain.entities import District, Page, Province, Regency
from backoffice.domain.exceptions import (
    BusinessRuleError,
    DuplicateEntityError,
    EntityNotFoundError,
    ReferencedEntityError,
)

logger = logging.getLogger(__name__)


class RegionService:

    def __init__(self, repository: RegionRepository):
        self._repository = repository

    # ── Provinces ────────────────────────────────────────────────────

    async def get_province(self, code: str) -> Province:
        province = await self._repository.get_province(code)
        if province is None:
            raise EntityNotFoundError("Province", code)
        return province

    async def get_provinces(self, codes: list[str]) -> list[Province]:
        return await self._repository.get_provinces(codes)

    async def list_provinces(
        self, *, search: str | None = None, page: int = 1, limit: int = 10
    ) -> Page[Province]:
        return await self._repository.list_provinces(search=search, page=page, limit=limit)

    async def create_province(self, data: ProvinceCreate) -> Province:
        if await self._repository.get_province(data.code) is not None:
            raise DuplicateEntityError("Province", "code", data.code)
        province = Province(code=data.code, name=data.name)
        await self._repository.save_provinces([province])
        logger.info("Created province %s", province.code)
        return province

    async def update_province(self, code: str, data: ProvinceUpdate) -> Province:
        province = await self.get_province(code)
        province.name = data.name
        await self._repository.save_provinces([province])
        logger.info("Updated province %s", code)
        return province

    async def delete_province(self, code: str) -> bool:
        await self.get_province(code)
        regencies = await self._repository.count_regencies(code)
        if regencies:
            raise ReferencedEntityError("Province", code, "regencies", regencies)
        deleted = await self._repository.delete_province(code)
        logger.info("Deleted province %s", code)
        return deleted

    async def bulk_upsert_provinces(self, rows: list[ProvinceCreate]) -> int:
        provinces = [Province(code=row.code, name=row.name) for row in rows]
        count = await self._repository.save_provinces(provinces)
        logger.info("Bulk upserted %d province(s)", count)
        return count

    # ── Regencies ────────────────────────────────────────────────────

    async def get_regency(self, code: str) -> Regency:
        regency = await self._repository.get_regency(code)
        if regency is None:
            raise EntityNotFoundError("Regency", code)
        return regency

    async def get_regencies(self, codes: list[str]) -> list[Regency]:
        return await self._repository.get_regencies(codes)

    async def list_regencies(
        self,
        *,
        search: str | None = None,
        province_code: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Regency]:
        return await self._repository.list_regencies(
            search=search, province_code=province_code, page=page, limit=limit
        )

    async def create_regency(self, data: RegencyCreate) -> Regency:
        if await self._repository.get_regency(data.code) is not None:
            raise DuplicateEntityError("Regency", "code", data.code)
        await self.get_province(data.province_code)
        regency = Regency(**data.model_dump())
        await self._repository.save_regencies([regency])
        logger.info("Created regency %s", regency.code)
        return regency

    async def update_regency(self, code: str, data: RegencyUpdate) -> Regency:
        regency = await self.get_regency(code)
        if data.province_code is not None:
            await self.get_province(data.province_code)
            regency.province_code = data.province_code
        if data.name is not None:
            regency.name = data.name
        await self._repository.save_regencies([regency])
        logger.info("Updated regency %s", code)
        return regency

    async def delete_regency(self, code: str) -> bool:
        await self.get_regency(code)
        districts = await self._repository.count_districts(code)
        if districts:
            raise ReferencedEntityError("Regency", code, "districts", districts)
        deleted = await self._repository.delete_regency(code)
        logger.info("Deleted regency %s", code)
        return deleted

    async def bulk_upsert_regencies(self, rows: list[RegencyCreate]) -> int:
        await self._require_parents(
            {row.province_code for row in rows}, self._repository.get_provinces, "province"
        )
        count = await self._repository.save_regencies([Regency(**row.model_dump()) for row in rows])
        logger.info("Bulk upserted %d regency(ies)", count)
        return count

    # ── Districts ────────────────────────────────────────────────────

    async def get_district(self, code: str) -> District:
        district = await self._repository.get_district(code)
        if district is None:
            raise EntityNotFoundError("District", code)
        return district

    async def get_districts(self, codes: list[str]) -> list[District]:
        return await self._repository.get_districts(codes)

    async def list_districts(
        self,
        *,
        search: str | None = None,
        regency_code: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[District]:
        return await self._repository.list_districts(
            search=search, regency_code=regency_code, page=page, limit=limit
        )

    async def create_district(self, data: DistrictCreate) -> District:
        if await self._repository.get_district(data.code) is not None:
            raise DuplicateEntityError("District", "code", data.code)
        await self.get_regency(data.regency_code)
        district = District(**data.model_dump())
        await self._repository.save_districts([district])
        logger.info("Created district %s", district.code)
        return district

    async def update_district(self, code: str, data: DistrictUpdate) -> District:
        district = await self.get_district(code)
        if data.regency_code is not None:
            await self.get_regency(data.regency_code)
            district.regency_code = data.regency_code
        if data.name is not None:
            district.name = data.name
        await self._repository.save_districts([district])
        logger.info("Updated district %s", code)
        return district

    async def delete_district(self, code: str) -> bool:
        await self.get_district(code)
        deleted = await self._repository.delete_district(code)
        logger.info("Deleted district %s", code)
        return deleted

    async def bulk_upsert_districts(self, rows: list[DistrictCreate]) -> int:
        await self._require_parents(
            {row.regency_code for row in rows}, self._repository.get_regencies, "regency"
        )
        count = await self._repository.save_districts([District(**row.model_dump()) for row in rows])
        logger.info("Bulk upserted %d district(s)", count)
        return count

    @staticmethod
    async def _require_parents(codes: set[str], fetch, label: str) -> None:
        found = {region.code for region in await fetch(sorted(codes))}
        missing = sorted(codes - found)
        if missing:
            raise BusinessRuleError(f"Unknown {label} code(s): {', '.join(missing)}")

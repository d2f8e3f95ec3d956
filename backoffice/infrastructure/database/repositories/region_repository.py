"""Concrete repository implementation for region reference data."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import RegionRepository
from backoffice.domain.entities import District, Page, Province, Regency
from backoffice.infrastructure.database.models import (
    DistrictModel,
    ProvinceModel,
    RegencyModel,
)

from .base import paginate, search_clause


def _province(model: ProvinceModel) -> Province:
    return Province(code=model.code, name=model.name)


def _regency(model: RegencyModel) -> Regency:
    return Regency(code=model.code, name=model.name, province_code=model.province_code)


def _district(model: DistrictModel) -> District:
    return District(code=model.code, name=model.name, regency_code=model.regency_code)


class SQLAlchemyRegionRepository(RegionRepository):
    """Provinces, regencies and districts share one repository; all are keyed by code."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _delete(self, model_class, code: str) -> bool:
        model = await self._session.get(model_class, code)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_many(self, model_class, codes: list[str]) -> list:
        if not codes:
            return []
        stmt = select(model_class).where(model_class.code.in_(codes)).order_by(model_class.code)
        return list((await self._session.execute(stmt)).scalars().all())

    # ── Provinces ────────────────────────────────────────────────────

    async def get_province(self, code: str) -> Province | None:
        model = await self._session.get(ProvinceModel, code)
        return _province(model) if model else None

    async def get_provinces(self, codes: list[str]) -> list[Province]:
        return [_province(m) for m in await self._get_many(ProvinceModel, codes)]

    async def list_provinces(
        self, *, search: str | None = None, page: int = 1, limit: int = 10
    ) -> Page[Province]:
        stmt = select(ProvinceModel)
        clause = search_clause(search, ProvinceModel.code, ProvinceModel.name)
        if clause is not None:
            stmt = stmt.where(clause)
        stmt = stmt.order_by(ProvinceModel.code)
        return await paginate(self._session, stmt, page=page, limit=limit, convert=_province)

    async def save_provinces(self, provinces: list[Province]) -> int:
        for province in provinces:
            await self._session.merge(ProvinceModel(code=province.code, name=province.name))
        await self._session.flush()
        return len(provinces)

    async def delete_province(self, code: str) -> bool:
        return await self._delete(ProvinceModel, code)

    # ── Regencies ────────────────────────────────────────────────────

    async def get_regency(self, code: str) -> Regency | None:
        model = await self._session.get(RegencyModel, code)
        return _regency(model) if model else None

    async def get_regencies(self, codes: list[str]) -> list[Regency]:
        return [_regency(m) for m in await self._get_many(RegencyModel, codes)]

    async def list_regencies(
        self,
        *,
        search: str | None = None,
        province_code: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Regency]:
        stmt = select(RegencyModel)
        clause = search_clause(search, RegencyModel.code, RegencyModel.name)
        if clause is not None:
            stmt = stmt.where(clause)
        if province_code is not None:
            stmt = stmt.where(RegencyModel.province_code == province_code)
        stmt = stmt.order_by(RegencyModel.code)
        return await paginate(self._session, stmt, page=page, limit=limit, convert=_regency)

    async def save_regencies(self, regencies: list[Regency]) -> int:
        for regency in regencies:
            await self._session.merge(
                RegencyModel(
                    code=regency.code, name=regency.name, province_code=regency.province_code
                )
            )
        await self._session.flush()
        return len(regencies)

    async def delete_regency(self, code: str) -> bool:
        return await self._delete(RegencyModel, code)

    async def count_regencies(self, province_code: str) -> int:
        stmt = select(func.count()).where(RegencyModel.province_code == province_code)
        return (await self._session.execute(stmt)).scalar_one()

    # ── Districts ────────────────────────────────────────────────────

    async def get_district(self, code: str) -> District | None:
        model = await self._session.get(DistrictModel, code)
        return _district(model) if model else None

    async def get_districts(self, codes: list[str]) -> list[District]:
        return [_district(m) for m in await self._get_many(DistrictModel, codes)]

    async def list_districts(
        self,
        *,
        search: str | None = None,
        regency_code: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[District]:
        stmt = select(DistrictModel)
        clause = search_clause(search, DistrictModel.code, DistrictModel.name)
        if clause is not None:
            stmt = stmt.where(clause)
        if regency_code is not None:
            stmt = stmt.where(DistrictModel.regency_code == regency_code)
        stmt = stmt.order_by(DistrictModel.code)
        return await paginate(self._session, stmt, page=page, limit=limit, convert=_district)

    async def save_districts(self, districts: list[District]) -> int:
        for district in districts:
            await self._session.merge(
                DistrictModel(
                    code=district.code, name=district.name, regency_code=district.regency_code
                )
            )
        await self._session.flush()
        return len(districts)

    async def delete_district(self, code: str) -> bool:
        return await self._delete(DistrictModel, code)

    async def count_districts(self, regency_code: str) -> int:
        stmt = select(func.count()).where(DistrictModel.regency_code == regency_code)
        return (await self._session.execute(stmt)).scalar_one()

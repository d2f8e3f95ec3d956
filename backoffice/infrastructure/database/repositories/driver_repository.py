"""Concrete repository implementation for Driver backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import DriverRepository
from backoffice.domain.entities import Driver, Gender, Page
from backoffice.infrastructure.database.models import DriverModel

from .base import copy_attributes, paginate, search_clause

_FIELDS = (
    "name",
    "address_line1",
    "address_line2",
    "city",
    "phone_number",
    "status_active",
    "active_date",
)


class SQLAlchemyDriverRepository(DriverRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DriverModel) -> Driver:
        driver = Driver(
            id=model.id,
            code=model.code,
            name=model.name,
            gender=Gender(model.gender),
            address_line1=model.address_line1,
            city=model.city,
            phone_number=model.phone_number,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        copy_attributes(driver, model, _FIELDS)
        return driver

    def _to_model(self, entity: Driver) -> DriverModel:
        model = DriverModel(
            id=entity.id,
            code=entity.code,
            gender=entity.gender.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        copy_attributes(model, entity, _FIELDS)
        return model

    async def get_by_id(self, driver_id: str) -> Driver | None:
        result = await self._session.get(DriverModel, driver_id)
        return self._to_entity(result) if result else None

    async def get_by_code(self, code: str) -> Driver | None:
        stmt = select(DriverModel).where(DriverModel.code == code)
        result = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(result) if result else None

    async def get_by_ids(self, driver_ids: list[str]) -> list[Driver]:
        if not driver_ids:
            return []
        stmt = select(DriverModel).where(DriverModel.id.in_(driver_ids)).order_by(DriverModel.code)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(
        self,
        *,
        search: str | None = None,
        gender: Gender | None = None,
        status_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Driver]:
        stmt = select(DriverModel)
        clause = search_clause(
            search, DriverModel.code, DriverModel.name, DriverModel.city, DriverModel.phone_number
        )
        if clause is not None:
            stmt = stmt.where(clause)
        if gender is not None:
            stmt = stmt.where(DriverModel.gender == gender.value)
        if status_active is not None:
            stmt = stmt.where(DriverModel.status_active == status_active)
        stmt = stmt.order_by(DriverModel.created_at.desc(), DriverModel.code)
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def create(self, driver: Driver) -> Driver:
        model = self._to_model(driver)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, driver: Driver) -> Driver:
        model = await self._session.get(DriverModel, driver.id)
        if model is None:
            raise ValueError(f"Driver {driver.id} not found in database")
        copy_attributes(model, driver, _FIELDS)
        model.gender = driver.gender.value
        model.updated_at = driver.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, driver_id: str) -> bool:
        model = await self._session.get(DriverModel, driver_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

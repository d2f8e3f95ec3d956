"""Concrete repository implementation for Vehicle backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import VehicleRepository
from backoffice.domain.entities import Page, Vehicle, VehicleType
from backoffice.infrastructure.database.models import VehicleModel

from .base import paginate, search_clause


class SQLAlchemyVehicleRepository(VehicleRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: VehicleModel) -> Vehicle:
        return Vehicle(
            id=model.id,
            vehicle_number=model.vehicle_number,
            vehicle_type=VehicleType(model.vehicle_type),
            vehicle_make=model.vehicle_make,
            vehicle_year=model.vehicle_year,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Vehicle) -> VehicleModel:
        return VehicleModel(
            id=entity.id,
            vehicle_number=entity.vehicle_number,
            vehicle_type=entity.vehicle_type.value,
            vehicle_make=entity.vehicle_make,
            vehicle_year=entity.vehicle_year,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        result = await self._session.get(VehicleModel, vehicle_id)
        return self._to_entity(result) if result else None

    async def get_by_number(self, vehicle_number: str) -> Vehicle | None:
        stmt = select(VehicleModel).where(VehicleModel.vehicle_number == vehicle_number)
        result = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(result) if result else None

    async def get_by_ids(self, vehicle_ids: list[str]) -> list[Vehicle]:
        if not vehicle_ids:
            return []
        stmt = (
            select(VehicleModel)
            .where(VehicleModel.id.in_(vehicle_ids))
            .order_by(VehicleModel.vehicle_number)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(
        self,
        *,
        search: str | None = None,
        vehicle_type: VehicleType | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Vehicle]:
        stmt = select(VehicleModel)
        clause = search_clause(
            search,
            VehicleModel.vehicle_number,
            VehicleModel.vehicle_make,
            VehicleModel.vehicle_type,
        )
        if clause is not None:
            stmt = stmt.where(clause)
        if vehicle_type is not None:
            stmt = stmt.where(VehicleModel.vehicle_type == vehicle_type.value)
        stmt = stmt.order_by(VehicleModel.created_at.desc(), VehicleModel.vehicle_number)
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def create(self, vehicle: Vehicle) -> Vehicle:
        model = self._to_model(vehicle)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, vehicle: Vehicle) -> Vehicle:
        model = await self._session.get(VehicleModel, vehicle.id)
        if model is None:
            raise ValueError(f"Vehicle {vehicle.id} not found in database")
        model.vehicle_type = vehicle.vehicle_type.value
        model.vehicle_make = vehicle.vehicle_make
        model.vehicle_year = vehicle.vehicle_year
        model.updated_at = vehicle.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, vehicle_id: str) -> bool:
        model = await self._session.get(VehicleModel, vehicle_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

"""Application service (use case) for Vehicle operations."""

import logging

from backoffice.application.interfaces import VehicleRepository
from backoffice.application.schemas.vehicle import VehicleCreate, VehicleUpdate
from backoffice.domain.entities import Page, Vehicle, VehicleType
from backoffice.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class VehicleService:

    def __init__(self, repository: VehicleRepository):
        self._repository = repository

    async def get_vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = await self._repository.get_by_id(vehicle_id)
        if vehicle is None:
            raise EntityNotFoundError("Vehicle", vehicle_id)
        return vehicle

    async def get_vehicles(self, vehicle_ids: list[str]) -> list[Vehicle]:
        return await self._repository.get_by_ids(vehicle_ids)

    async def list_vehicles(
        self,
        *,
        search: str | None = None,
        vehicle_type: VehicleType | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Vehicle]:
        return await self._repository.get_all(
            search=search, vehicle_type=vehicle_type, page=page, limit=limit
        )

    async def create_vehicle(self, data: VehicleCreate) -> Vehicle:
        if await self._repository.get_by_number(data.vehicle_number) is not None:
            raise DuplicateEntityError("Vehicle", "vehicle_number", data.vehicle_number)
        created = await self._repository.create(Vehicle(**data.model_dump()))
        logger.info("Created vehicle %s (%s)", created.vehicle_number, created.id)
        return created

    async def update_vehicle(self, vehicle_id: str, data: VehicleUpdate) -> Vehicle:
        vehicle = await self.get_vehicle(vehicle_id)
        vehicle.update(**data.model_dump(exclude_unset=True))
        updated = await self._repository.update(vehicle)
        logger.info("Updated vehicle %s", updated.vehicle_number)
        return updated

    async def delete_vehicle(self, vehicle_id: str) -> bool:
        vehicle = await self.get_vehicle(vehicle_id)
        deleted = await self._repository.delete(vehicle_id)
        logger.info("Deleted vehicle %s", vehicle.vehicle_number)
        return deleted

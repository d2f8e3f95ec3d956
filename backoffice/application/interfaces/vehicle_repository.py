"""Abstract repository interface (port) for Vehicle persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Page, Vehicle, VehicleType


class VehicleRepository(ABC):

    @abstractmethod
    async def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        ...

    @abstractmethod
    async def get_by_number(self, vehicle_number: str) -> Vehicle | None:
        ...

    @abstractmethod
    async def get_by_ids(self, vehicle_ids: list[str]) -> list[Vehicle]:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        vehicle_type: VehicleType | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Vehicle]:
        ...

    @abstractmethod
    async def create(self, vehicle: Vehicle) -> Vehicle:
        ...

    @abstractmethod
    async def update(self, vehicle: Vehicle) -> Vehicle:
        ...

    @abstractmethod
    async def delete(self, vehicle_id: str) -> bool:
        ...

"""Abstract repository interface (port) for Driver persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Driver, Gender, Page


class DriverRepository(ABC):

    @abstractmethod
    async def get_by_id(self, driver_id: str) -> Driver | None:
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Driver | None:
        ...

    @abstractmethod
    async def get_by_ids(self, driver_ids: list[str]) -> list[Driver]:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        gender: Gender | None = None,
        status_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Driver]:
        ...

    @abstractmethod
    async def create(self, driver: Driver) -> Driver:
        ...

    @abstractmethod
    async def update(self, driver: Driver) -> Driver:
        ...

    @abstractmethod
    async def delete(self, driver_id: str) -> bool:
        ...

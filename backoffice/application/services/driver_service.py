"""Application service (use case) for Driver operations."""

import logging

from backoffice.application.interfaces import DriverRepository
from backoffice.application.schemas.driver import DriverCreate, DriverUpdate
from backoffice.domain.entities import Driver, Gender, Page
from backoffice.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class DriverService:

    def __init__(self, repository: DriverRepository):
        self._repository = repository

    async def get_driver(self, driver_id: str) -> Driver:
        driver = await self._repository.get_by_id(driver_id)
        if driver is None:
            raise EntityNotFoundError("Driver", driver_id)
        return driver

    async def get_drivers(self, driver_ids: list[str]) -> list[Driver]:
        return await self._repository.get_by_ids(driver_ids)

    async def list_drivers(
        self,
        *,
        search: str | None = None,
        gender: Gender | None = None,
        status_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Driver]:
        return await self._repository.get_all(
            search=search,
            gender=gender,
            status_active=status_active,
            page=page,
            limit=limit,
        )

    async def create_driver(self, data: DriverCreate) -> Driver:
        if await self._repository.get_by_code(data.code) is not None:
            raise DuplicateEntityError("Driver", "code", data.code)
        created = await self._repository.create(Driver(**data.model_dump()))
        logger.info("Created driver %s (%s)", created.code, created.id)
        return created

    async def update_driver(self, driver_id: str, data: DriverUpdate) -> Driver:
        driver = await self.get_driver(driver_id)
        driver.update(**data.model_dump(exclude_unset=True))
        updated = await self._repository.update(driver)
        logger.info("Updated driver %s", updated.code)
        return updated

    async def delete_driver(self, driver_id: str) -> bool:
        driver = await self.get_driver(driver_id)
        deleted = await self._repository.delete(driver_id)
        logger.info("Deleted driver %s", driver.code)
        return deleted

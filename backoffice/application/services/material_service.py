"""Application service (use case) for Material operations."""

import logging

from backoffice.application.interfaces import MaterialInRepository, MaterialRepository
from backoffice.application.schemas.material import MaterialCreate, MaterialUpdate
from backoffice.domain.entities import Material, MaterialCategory, Page
from backoffice.domain.exceptions import (
    BusinessRuleError,
    DuplicateEntityError,
    EntityNotFoundError,
    ReferencedEntityError,
)

logger = logging.getLogger(__name__)


class MaterialService:

    def __init__(
        self,
        repository: MaterialRepository,
        material_in_repository: MaterialInRepository,
    ):
        self._repository = repository
        self._material_ins = material_in_repository

    async def get_material(self, material_id: str) -> Material:
        material = await self._repository.get_by_id(material_id)
        if material is None:
            raise EntityNotFoundError("Material", material_id)
        return material

    async def get_materials(self, material_ids: list[str]) -> list[Material]:
        return await self._repository.get_by_ids(material_ids)

    async def list_materials(
        self,
        *,
        search: str | None = None,
        category: MaterialCategory | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Material]:
        return await self._repository.get_all(
            search=search, category=category, page=page, limit=limit
        )

    async def create_material(self, data: MaterialCreate) -> Material:
        if await self._repository.get_by_code(data.code) is not None:
            raise DuplicateEntityError("Material", "code", data.code)
        # Opening stock counts as good stock.
        material = Material(good_stock=data.current_stock, **data.model_dump())
        created = await self._repository.create(material)
        logger.info("Created material %s (%s)", created.code, created.id)
        return created

    async def update_material(self, material_id: str, data: MaterialUpdate) -> Material:
        material = await self.get_material(material_id)
        material.update(**data.model_dump(exclude_unset=True))
        if (
            material.maximum_stock is not None
            and material.maximum_stock < material.minimum_stock
        ):
            raise BusinessRuleError("maximum_stock must not be lower than minimum_stock")
        updated = await self._repository.update(material)
        logger.info("Updated material %s", updated.code)
        return updated

    async def delete_material(self, material_id: str) -> bool:
        material = await self.get_material(material_id)
        usages = await self._material_ins.count_items_by_material(material_id)
        if usages:
            raise ReferencedEntityError(
                "Material", material.code, "material purchase items", usages
            )
        deleted = await self._repository.delete(material_id)
        logger.info("Deleted material %s", material.code)
        return deleted

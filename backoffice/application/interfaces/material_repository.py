"""Abstract repository interface (port) for Material persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Material, MaterialCategory, Page


class MaterialRepository(ABC):
    """Port for material persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, material_id: str) -> Material | None:
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Material | None:
        ...

    @abstractmethod
    async def get_by_ids(self, material_ids: list[str]) -> list[Material]:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        category: MaterialCategory | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Material]:
        ...

    @abstractmethod
    async def create(self, material: Material) -> Material:
        ...

    @abstractmethod
    async def update(self, material: Material) -> Material:
        """Persist all mutable fields, stock levels included."""
        ...

    @abstractmethod
    async def delete(self, material_id: str) -> bool:
        ...

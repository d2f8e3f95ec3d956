"""Abstract repository interface (port) for MaterialIn persistence."""

from abc import ABC, abstractmethod
from datetime import date

from backoffice.domain.entities import MaterialIn, Page


class MaterialInRepository(ABC):
    """Port for material purchase persistence."""

    @abstractmethod
    async def get_by_id(self, material_in_id: str) -> MaterialIn | None:
        ...

    @abstractmethod
    async def get_by_ids(self, material_in_ids: list[str]) -> list[MaterialIn]:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        supplier_id: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[MaterialIn]:
        ...

    @abstractmethod
    async def get_last_transaction_no(self, prefix: str) -> str | None:
        """Highest transaction number starting with ``prefix``."""
        ...

    @abstractmethod
    async def count_by_supplier(self, supplier_id: str) -> int:
        ...

    @abstractmethod
    async def count_items_by_material(self, material_id: str) -> int:
        ...

    @abstractmethod
    async def create(self, material_in: MaterialIn) -> MaterialIn:
        """Persist the purchase together with its items."""
        ...

    @abstractmethod
    async def update(self, material_in: MaterialIn) -> MaterialIn:
        """Persist header fields only; items are fixed once stock is booked."""
        ...

    @abstractmethod
    async def delete(self, material_in_id: str) -> bool:
        ...

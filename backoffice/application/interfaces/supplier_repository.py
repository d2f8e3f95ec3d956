"""Abstract repository interface (port) for Supplier persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Page, StatusActive, Supplier, SupplierType


class SupplierRepository(ABC):
    """Port for supplier persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, supplier_id: str) -> Supplier | None:
        ...

    @abstractmethod
    async def get_by_ids(self, supplier_ids: list[str]) -> list[Supplier]:
        """Fetch several suppliers at once (used by CSV export)."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        supplier_type: SupplierType | None = None,
        status_active: StatusActive | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Supplier]:
        """Retrieve a filtered page of suppliers, newest first."""
        ...

    @abstractmethod
    async def get_last_code(self) -> str | None:
        """Highest code issued so far, used to derive the next one."""
        ...

    @abstractmethod
    async def create(self, supplier: Supplier) -> Supplier:
        ...

    @abstractmethod
    async def update(self, supplier: Supplier) -> Supplier:
        """Persist root fields and synchronise addresses/contacts by id."""
        ...

    @abstractmethod
    async def delete(self, supplier_id: str) -> bool:
        """Delete a supplier. Returns True if deleted, False if not found."""
        ...

"""Abstract repository interface (port) for Customer persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Customer, CustomerType, Page, StatusActive


class CustomerRepository(ABC):
    """Port for customer persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, customer_id: str) -> Customer | None:
        ...

    @abstractmethod
    async def get_by_ids(self, customer_ids: list[str]) -> list[Customer]:
        """Fetch several customers at once (used by CSV export)."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        customer_type: CustomerType | None = None,
        status_active: StatusActive | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Customer]:
        """Retrieve a filtered page of customers, newest first."""
        ...

    @abstractmethod
    async def get_last_code(self) -> str | None:
        """Highest code issued so far, used to derive the next one."""
        ...

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        ...

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """Persist root fields and synchronise addresses/contacts by id."""
        ...

    @abstractmethod
    async def delete(self, customer_id: str) -> bool:
        """Delete a customer. Returns True if deleted, False if not found."""
        ...

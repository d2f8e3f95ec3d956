"""Abstract repository interface (port) for Employee persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Employee, Page


class EmployeeRepository(ABC):

    @abstractmethod
    async def get_by_id(self, employee_id: str) -> Employee | None:
        ...

    @abstractmethod
    async def get_by_nik(self, nik: str) -> Employee | None:
        ...

    @abstractmethod
    async def get_by_ids(self, employee_ids: list[str]) -> list[Employee]:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Employee]:
        ...

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        ...

    @abstractmethod
    async def update(self, employee: Employee) -> Employee:
        """Persist root fields and synchronise employments by id."""
        ...

    @abstractmethod
    async def delete(self, employee_id: str) -> bool:
        ...

"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities import Page, Role, User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        role: Role | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        ...

"""Application service for back-office user accounts."""

import logging

from backoffice.application.interfaces import UserRepository
from backoffice.application.schemas.user import UserCreate
from backoffice.domain.entities import Page, Role, User
from backoffice.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def list_users(
        self,
        *,
        search: str | None = None,
        role: Role | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[User]:
        return await self._repository.get_all(
            search=search, role=role, is_active=is_active, page=page, limit=limit
        )

    async def create_user(self, data: UserCreate) -> User:
        email = data.email.lower()
        if await self._repository.get_by_email(email) is not None:
            raise DuplicateEntityError("User", "email", email)
        created = await self._repository.create(
            User(**data.model_dump(exclude={"email"}), email=email)
        )
        logger.info("Created user %s with role %s", created.email, created.role.value)
        return created

    async def update_role(self, user_id: str, role: Role) -> User:
        user = await self.get_user(user_id)
        user.update(role=role)
        updated = await self._repository.update(user)
        logger.info("User %s role set to %s", updated.email, role.value)
        return updated

    async def update_status(self, user_id: str, is_active: bool) -> User:
        user = await self.get_user(user_id)
        user.update(is_active=is_active)
        updated = await self._repository.update(user)
        logger.info("User %s %s", updated.email, "activated" if is_active else "deactivated")
        return updated

    async def delete_user(self, user_id: str) -> bool:
        user = await self.get_user(user_id)
        deleted = await self._repository.delete(user_id)
        logger.info("Deleted user %s", user.email)
        return deleted

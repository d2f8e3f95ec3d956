"""Unit tests for UserService."""

import pytest

from backoffice.application.interfaces import UserRepository
from backoffice.application.schemas.user import UserCreate
from backoffice.application.services import UserService
from backoffice.domain.entities import Page, Role, User
from backoffice.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class FakeUserRepository(UserRepository):

    def __init__(self):
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id):
        return self._users.get(user_id)

    async def get_by_email(self, email):
        return next((u for u in self._users.values() if u.email == email), None)

    async def get_all(self, *, search=None, role=None, is_active=None, page=1, limit=10):
        rows = [
            u
            for u in self._users.values()
            if (role is None or u.role == role) and (is_active is None or u.is_active == is_active)
        ]
        return Page(data=rows, total=len(rows), page=page, limit=limit)

    async def create(self, user):
        self._users[user.id] = user
        return user

    async def update(self, user):
        self._users[user.id] = user
        return user

    async def delete(self, user_id):
        return self._users.pop(user_id, None) is not None


@pytest.fixture
def service() -> UserService:
    return UserService(FakeUserRepository())


@pytest.mark.asyncio
async def test_create_user_lowercases_email(service: UserService):
    user = await service.create_user(UserCreate(fullname="Ana", email="Ana@Example.com"))
    assert user.email == "ana@example.com"
    assert user.role == Role.USER
    assert user.is_active is True


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(service: UserService):
    await service.create_user(UserCreate(fullname="Ana", email="ana@example.com"))
    with pytest.raises(DuplicateEntityError):
        await service.create_user(UserCreate(fullname="Other Ana", email="ANA@example.com"))


@pytest.mark.asyncio
async def test_update_role_and_status(service: UserService):
    user = await service.create_user(UserCreate(fullname="Ana", email="ana@example.com"))
    await service.update_role(user.id, Role.MANAGER)
    await service.update_status(user.id, False)
    page = await service.list_users(role=Role.MANAGER, is_active=False)
    assert [u.id for u in page.data] == [user.id]


@pytest.mark.asyncio
async def test_delete_missing_user(service: UserService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_user("missing")

"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import UserRepository
from backoffice.domain.entities import Page, Role, User
from backoffice.infrastructure.database.models import UserModel

from .base import paginate, search_clause


class SQLAlchemyUserRepository(UserRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            fullname=model.fullname,
            email=model.email,
            role=Role(model.role),
            is_active=model.is_active,
            profile_pic=model.profile_pic,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_id(self, user_id: str) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        search: str | None = None,
        role: Role | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[User]:
        stmt = select(UserModel)
        clause = search_clause(search, UserModel.fullname, UserModel.email, UserModel.role)
        if clause is not None:
            stmt = stmt.where(clause)
        if role is not None:
            stmt = stmt.where(UserModel.role == role.value)
        if is_active is not None:
            stmt = stmt.where(UserModel.is_active == is_active)
        stmt = stmt.order_by(UserModel.created_at.desc(), UserModel.email)
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def create(self, user: User) -> User:
        model = UserModel(
            id=user.id,
            fullname=user.fullname,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            profile_pic=user.profile_pic,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise ValueError(f"User {user.id} not found in database")
        model.fullname = user.fullname
        model.role = user.role.value
        model.is_active = user.is_active
        model.profile_pic = user.profile_pic
        model.updated_at = user.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, user_id: str) -> bool:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

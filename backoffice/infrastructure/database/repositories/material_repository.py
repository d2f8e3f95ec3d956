"""Concrete repository implementation for Material backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import MaterialRepository
from backoffice.domain.entities import Material, MaterialCategory, Page, Unit
from backoffice.infrastructure.database.models import MaterialModel

from .base import copy_attributes, paginate, search_clause

_FIELDS = (
    "name",
    "description",
    "brand",
    "current_stock",
    "minimum_stock",
    "maximum_stock",
    "good_stock",
    "bad_stock",
    "last_purchase_price",
)


class SQLAlchemyMaterialRepository(MaterialRepository):
    """Implements the MaterialRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MaterialModel) -> Material:
        material = Material(
            id=model.id,
            code=model.code,
            name=model.name,
            category=MaterialCategory(model.category),
            unit=Unit(model.unit),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        copy_attributes(material, model, _FIELDS)
        return material

    def _to_model(self, entity: Material) -> MaterialModel:
        model = MaterialModel(
            id=entity.id,
            code=entity.code,
            category=entity.category.value,
            unit=entity.unit.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        copy_attributes(model, entity, _FIELDS)
        return model

    async def get_by_id(self, material_id: str) -> Material | None:
        result = await self._session.get(MaterialModel, material_id)
        return self._to_entity(result) if result else None

    async def get_by_code(self, code: str) -> Material | None:
        stmt = select(MaterialModel).where(MaterialModel.code == code)
        result = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(result) if result else None

    async def get_by_ids(self, material_ids: list[str]) -> list[Material]:
        if not material_ids:
            return []
        stmt = (
            select(MaterialModel)
            .where(MaterialModel.id.in_(material_ids))
            .order_by(MaterialModel.code)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(
        self,
        *,
        search: str | None = None,
        category: MaterialCategory | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Material]:
        stmt = select(MaterialModel)
        clause = search_clause(
            search,
            MaterialModel.code,
            MaterialModel.name,
            MaterialModel.description,
            MaterialModel.category,
            MaterialModel.brand,
        )
        if clause is not None:
            stmt = stmt.where(clause)
        if category is not None:
            stmt = stmt.where(MaterialModel.category == category.value)
        stmt = stmt.order_by(MaterialModel.created_at.desc(), MaterialModel.code)
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def create(self, material: Material) -> Material:
        model = self._to_model(material)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, material: Material) -> Material:
        model = await self._session.get(MaterialModel, material.id)
        if model is None:
            raise ValueError(f"Material {material.id} not found in database")
        copy_attributes(model, material, _FIELDS)
        model.category = material.category.value
        model.unit = material.unit.value
        model.updated_at = material.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, material_id: str) -> bool:
        model = await self._session.get(MaterialModel, material_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

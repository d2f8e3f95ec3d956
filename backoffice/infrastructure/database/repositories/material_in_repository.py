"""Concrete repository implementation for MaterialIn backed by SQLAlchemy."""

from datetime import date, datetime, time, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import MaterialInRepository
from backoffice.domain.entities import MaterialIn, MaterialInItem, Page, StockType
from backoffice.infrastructure.database.models import MaterialInItemModel, MaterialInModel

from .base import copy_attributes, loaded_or_none, paginate, search_clause

_HEADER_FIELDS = (
    "supplier_id",
    "supplier_name",
    "transaction_date",
    "invoice_no",
    "total_amount_before_tax",
    "total_tax",
    "other_costs",
    "total_amount",
    "notes",
    "created_by",
)
_ITEM_FIELDS = (
    "material_id",
    "quantity",
    "unit_price",
    "total_price",
    "stock_before",
    "stock_after",
    "notes",
)


class SQLAlchemyMaterialInRepository(MaterialInRepository):
    """Implements the MaterialInRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MaterialInModel) -> MaterialIn:
        material_in = MaterialIn(
            id=model.id,
            transaction_no=model.transaction_no,
            supplier_id=model.supplier_id,
            supplier_name=model.supplier_name,
            items=[self._item_to_entity(item) for item in model.items],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        copy_attributes(material_in, model, _HEADER_FIELDS)
        return material_in

    @staticmethod
    def _item_to_entity(model: MaterialInItemModel) -> MaterialInItem:
        item = MaterialInItem(
            id=model.id,
            material_id=model.material_id,
            quantity=model.quantity,
            unit_price=model.unit_price,
            stock_type=StockType(model.stock_type),
        )
        copy_attributes(item, model, _ITEM_FIELDS)
        material = loaded_or_none(model, "material")
        if material is not None:
            item.material_code = material.code
            item.material_name = material.name
        return item

    def _to_model(self, entity: MaterialIn) -> MaterialInModel:
        model = MaterialInModel(
            id=entity.id,
            transaction_no=entity.transaction_no,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        copy_attributes(model, entity, _HEADER_FIELDS)
        for item in entity.items:
            item_model = MaterialInItemModel(id=item.id, stock_type=item.stock_type.value)
            copy_attributes(item_model, item, _ITEM_FIELDS)
            model.items.append(item_model)
        return model

    async def get_by_id(self, material_in_id: str) -> MaterialIn | None:
        result = await self._session.get(MaterialInModel, material_in_id)
        return self._to_entity(result) if result else None

    async def get_by_ids(self, material_in_ids: list[str]) -> list[MaterialIn]:
        if not material_in_ids:
            return []
        stmt = (
            select(MaterialInModel)
            .where(MaterialInModel.id.in_(material_in_ids))
            .order_by(MaterialInModel.transaction_no)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

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
        stmt = select(MaterialInModel)
        clause = search_clause(
            search,
            MaterialInModel.transaction_no,
            MaterialInModel.supplier_name,
            MaterialInModel.invoice_no,
        )
        if clause is not None:
            stmt = stmt.where(clause)
        if supplier_id is not None:
            stmt = stmt.where(MaterialInModel.supplier_id == supplier_id)
        if start_date is not None:
            since = datetime.combine(start_date, time.min, tzinfo=timezone.utc)
            stmt = stmt.where(MaterialInModel.transaction_date >= since)
        if end_date is not None:
            until = datetime.combine(end_date, time.max, tzinfo=timezone.utc)
            stmt = stmt.where(MaterialInModel.transaction_date <= until)
        stmt = stmt.order_by(
            MaterialInModel.transaction_date.desc(), MaterialInModel.transaction_no.desc()
        )
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def get_last_transaction_no(self, prefix: str) -> str | None:
        stmt = (
            select(MaterialInModel.transaction_no)
            .where(MaterialInModel.transaction_no.like(f"{prefix}%"))
            .order_by(MaterialInModel.transaction_no.desc())
            .limit(1)
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def count_by_supplier(self, supplier_id: str) -> int:
        stmt = select(func.count()).where(MaterialInModel.supplier_id == supplier_id)
        return (await self._session.execute(stmt)).scalar_one()

    async def count_items_by_material(self, material_id: str) -> int:
        stmt = select(func.count()).where(MaterialInItemModel.material_id == material_id)
        return (await self._session.execute(stmt)).scalar_one()

    async def create(self, material_in: MaterialIn) -> MaterialIn:
        model = self._to_model(material_in)
        self._session.add(model)
        await self._session.flush()
        created = self._to_entity(model)
        # Freshly inserted items have no loaded material; keep the names we already know.
        for item, source in zip(created.items, material_in.items):
            item.material_code = item.material_code or source.material_code
            item.material_name = item.material_name or source.material_name
        return created

    async def update(self, material_in: MaterialIn) -> MaterialIn:
        model = await self._session.get(MaterialInModel, material_in.id)
        if model is None:
            raise ValueError(f"MaterialIn {material_in.id} not found in database")
        copy_attributes(model, material_in, _HEADER_FIELDS)
        model.updated_at = material_in.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, material_in_id: str) -> bool:
        model = await self._session.get(MaterialInModel, material_in_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

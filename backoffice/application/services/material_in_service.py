"""Application service for material purchases and the stock bookings they cause."""

import logging
from datetime import date

from backoffice.application.interfaces import (
    MaterialInRepository,
    MaterialRepository,
    SupplierRepository,
)
from backoffice.application.schemas.material_in import MaterialInCreate, MaterialInUpdate
from backoffice.domain import calculations
from backoffice.domain.entities import Material, MaterialIn, MaterialInItem, Page
from backoffice.domain.entities.base import utcnow
from backoffice.domain.exceptions import BusinessRuleError, EntityNotFoundError
from backoffice.domain.numbering import (
    MATERIAL_IN_PREFIX,
    next_transaction_no,
    transaction_prefix,
)

logger = logging.getLogger(__name__)


class MaterialInService:
    """Creates purchases, books their stock, and reverses the booking on delete."""

    def __init__(
        self,
        repository: MaterialInRepository,
        material_repository: MaterialRepository,
        supplier_repository: SupplierRepository,
    ):
        self._repository = repository
        self._materials = material_repository
        self._suppliers = supplier_repository

    async def get_material_in(self, material_in_id: str) -> MaterialIn:
        material_in = await self._repository.get_by_id(material_in_id)
        if material_in is None:
            raise EntityNotFoundError("MaterialIn", material_in_id)
        return material_in

    async def get_material_ins(self, material_in_ids: list[str]) -> list[MaterialIn]:
        return await self._repository.get_by_ids(material_in_ids)

    async def list_material_ins(
        self,
        *,
        search: str | None = None,
        supplier_id: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[MaterialIn]:
        return await self._repository.get_all(
            search=search,
            supplier_id=supplier_id,
            start_date=start_date,
            end_date=end_date,
            page=page,
            limit=limit,
        )

    async def next_transaction_no(self, on: date | None = None) -> str:
        on = on or utcnow().date()
        last = await self._repository.get_last_transaction_no(
            transaction_prefix(MATERIAL_IN_PREFIX, on)
        )
        return next_transaction_no(MATERIAL_IN_PREFIX, last, on)

    async def create_material_in(self, data: MaterialInCreate) -> MaterialIn:
        supplier = await self._suppliers.get_by_id(data.supplier_id)
        if supplier is None:
            raise EntityNotFoundError("Supplier", data.supplier_id)

        materials = await self._load_materials([item.material_id for item in data.items])

        items: list[MaterialInItem] = []
        for payload in data.items:
            material = materials[payload.material_id]
            before, after = material.book_stock(payload.stock_type, payload.quantity)
            material.last_purchase_price = payload.unit_price
            items.append(
                MaterialInItem(
                    material_id=material.id,
                    material_code=material.code,
                    material_name=material.name,
                    quantity=payload.quantity,
                    unit_price=payload.unit_price,
                    total_price=calculations.line_total(payload.quantity, payload.unit_price),
                    stock_type=payload.stock_type,
                    stock_before=before,
                    stock_after=after,
                    notes=payload.notes,
                )
            )

        subtotal = calculations.subtotal(item.total_price for item in items)
        tax = data.total_tax
        if data.tax_percentage is not None:
            tax = calculations.tax_from_percentage(subtotal, data.tax_percentage)

        transaction_date = data.transaction_date or utcnow()
        material_in = MaterialIn(
            transaction_no=await self.next_transaction_no(transaction_date.date()),
            supplier_id=supplier.id,
            supplier_name=supplier.name,
            transaction_date=transaction_date,
            invoice_no=data.invoice_no,
            total_amount_before_tax=subtotal,
            total_tax=tax,
            other_costs=data.other_costs,
            total_amount=calculations.grand_total([subtotal], tax, data.other_costs),
            notes=data.notes,
            created_by=data.created_by,
            items=items,
        )

        for material in materials.values():
            await self._materials.update(material)
        created = await self._repository.create(material_in)
        logger.info(
            "Created material-in %s with %d item(s), total %s",
            created.transaction_no,
            len(created.items),
            calculations.format_money(created.total_amount),
        )
        return created

    async def update_material_in(
        self, material_in_id: str, data: MaterialInUpdate
    ) -> MaterialIn:
        material_in = await self.get_material_in(material_in_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("transaction_date", ...) is None:
            changes.pop("transaction_date")
        material_in.update(**changes)
        material_in.total_amount = calculations.grand_total(
            [material_in.total_amount_before_tax],
            material_in.total_tax,
            material_in.other_costs,
        )
        updated = await self._repository.update(material_in)
        logger.info("Updated material-in %s", updated.transaction_no)
        return updated

    async def delete_material_in(self, material_in_id: str) -> bool:
        material_in = await self.get_material_in(material_in_id)

        touched: dict[str, Material] = {}
        for item in material_in.items:
            material = touched.get(item.material_id) or await self._materials.get_by_id(
                item.material_id
            )
            if material is None:
                logger.warning(
                    "Material %s of %s no longer exists; skipping stock reversal",
                    item.material_id,
                    material_in.transaction_no,
                )
                continue
            try:
                material.book_stock(item.stock_type, -item.quantity)
            except ValueError as e:
                raise BusinessRuleError(str(e)) from e
            touched[material.id] = material

        for material in touched.values():
            await self._materials.update(material)
        deleted = await self._repository.delete(material_in_id)
        logger.info(
            "Deleted material-in %s and reversed %d stock booking(s)",
            material_in.transaction_no,
            len(material_in.items),
        )
        return deleted

    async def _load_materials(self, material_ids: list[str]) -> dict[str, Material]:
        materials: dict[str, Material] = {}
        for material_id in material_ids:
            if material_id in materials:
                continue
            material = await self._materials.get_by_id(material_id)
            if material is None:
                raise EntityNotFoundError("Material", material_id)
            materials[material_id] = material
        return materials

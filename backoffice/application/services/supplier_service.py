"""Application service (use case) for Supplier operations."""

import logging

from backoffice.application.interfaces import MaterialInRepository, SupplierRepository
from backoffice.application.schemas.supplier import SupplierCreate, SupplierUpdate
from backoffice.domain.entities import (
    Address,
    Contact,
    Page,
    StatusActive,
    Supplier,
    SupplierType,
)
from backoffice.domain.exceptions import EntityNotFoundError, ReferencedEntityError
from backoffice.domain.numbering import SUPPLIER_PREFIX, next_party_code

from .sub_records import build_sub_records, merge_sub_records

logger = logging.getLogger(__name__)


class SupplierService:
    """Orchestrates supplier CRUD logic. Depends on repository ports (DI)."""

    def __init__(
        self,
        repository: SupplierRepository,
        material_in_repository: MaterialInRepository,
    ):
        self._repository = repository
        self._material_ins = material_in_repository

    async def get_supplier(self, supplier_id: str) -> Supplier:
        supplier = await self._repository.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError("Supplier", supplier_id)
        return supplier

    async def get_suppliers(self, supplier_ids: list[str]) -> list[Supplier]:
        return await self._repository.get_by_ids(supplier_ids)

    async def list_suppliers(
        self,
        *,
        search: str | None = None,
        supplier_type: SupplierType | None = None,
        status_active: StatusActive | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Supplier]:
        return await self._repository.get_all(
            search=search,
            supplier_type=supplier_type,
            status_active=status_active,
            page=page,
            limit=limit,
        )

    async def next_code(self) -> str:
        return next_party_code(SUPPLIER_PREFIX, await self._repository.get_last_code())

    async def create_supplier(self, data: SupplierCreate) -> Supplier:
        values = data.model_dump(exclude={"addresses", "contacts"})
        supplier = Supplier(
            code=await self.next_code(),
            addresses=build_sub_records(data.addresses, Address),
            contacts=build_sub_records(data.contacts, Contact),
            **values,
        )
        created = await self._repository.create(supplier)
        logger.info("Created supplier %s (%s)", created.code, created.id)
        return created

    async def update_supplier(self, supplier_id: str, data: SupplierUpdate) -> Supplier:
        supplier = await self.get_supplier(supplier_id)

        changes = data.model_dump(exclude_unset=True, exclude={"addresses", "contacts"})
        if data.addresses is not None:
            changes["addresses"] = merge_sub_records(
                supplier.addresses, data.addresses, Address, "Address"
            )
        if data.contacts is not None:
            changes["contacts"] = merge_sub_records(
                supplier.contacts, data.contacts, Contact, "Contact"
            )

        supplier.update(**changes)
        updated = await self._repository.update(supplier)
        logger.info("Updated supplier %s", updated.code)
        return updated

    async def delete_supplier(self, supplier_id: str) -> bool:
        supplier = await self.get_supplier(supplier_id)
        purchases = await self._material_ins.count_by_supplier(supplier_id)
        if purchases:
            raise ReferencedEntityError("Supplier", supplier.code, "material purchases", purchases)
        deleted = await self._repository.delete(supplier_id)
        logger.info("Deleted supplier %s", supplier.code)
        return deleted

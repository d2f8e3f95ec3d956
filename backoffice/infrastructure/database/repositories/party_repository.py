"""Concrete repositories for suppliers and customers backed by SQLAlchemy.

Both tables share the same shape, so the mapping lives in one generic base
class and the two public repositories only bind the model classes.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import CustomerRepository, SupplierRepository
from backoffice.domain.entities import (
    Address,
    AddressType,
    Contact,
    ContactType,
    Customer,
    CustomerType,
    Page,
    StatusActive,
    Supplier,
    SupplierType,
)
from backoffice.infrastructure.database.models import (
    CustomerAddressModel,
    CustomerContactModel,
    CustomerModel,
    SupplierAddressModel,
    SupplierContactModel,
    SupplierModel,
)

from .base import copy_attributes, paginate, search_clause, sync_children

_PARTY_FIELDS = (
    "name",
    "active_date",
    "notes",
    "npwp_number",
    "npwp_name",
    "npwp_address",
    "npwp_date",
)
_ADDRESS_FIELDS = (
    "address_line1",
    "address_line2",
    "country_code",
    "zipcode",
    "province_code",
    "regency_code",
    "district_code",
    "is_primary",
)
_CONTACT_FIELDS = ("name", "phone_number", "email", "is_primary")


class _SQLAlchemyPartyRepository:
    """Shared persistence for the two party tables."""

    model: Any
    address_model: Any
    contact_model: Any
    entity: Any
    type_field: str
    type_enum: Any
    code_prefix: str

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Mapping ──────────────────────────────────────────────────────

    def _to_entity(self, model: Any) -> Any:
        """Map ORM model → domain entity."""
        values = {name: getattr(model, name) for name in _PARTY_FIELDS}
        return self.entity(
            id=model.id,
            code=model.code,
            status_active=StatusActive(model.status_active),
            addresses=[self._address_to_entity(a) for a in model.addresses],
            contacts=[self._contact_to_entity(c) for c in model.contacts],
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{self.type_field: self.type_enum(getattr(model, self.type_field))},
            **values,
        )

    def _to_model(self, entity: Any) -> Any:
        """Map domain entity → ORM model (for creation)."""
        model = self.model(
            id=entity.id,
            code=entity.code,
            status_active=entity.status_active.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            **{self.type_field: getattr(entity, self.type_field).value},
        )
        copy_attributes(model, entity, _PARTY_FIELDS)
        model.addresses = [self._address_to_model(a) for a in entity.addresses]
        model.contacts = [self._contact_to_model(c) for c in entity.contacts]
        return model

    @staticmethod
    def _address_to_entity(model: Any) -> Address:
        address = Address(
            id=model.id,
            address_type=AddressType(model.address_type),
            address_line1=model.address_line1,
            country_code=model.country_code,
        )
        copy_attributes(address, model, _ADDRESS_FIELDS)
        return address

    def _address_to_model(self, entity: Address) -> Any:
        model = self.address_model(id=entity.id, address_type=entity.address_type.value)
        copy_attributes(model, entity, _ADDRESS_FIELDS)
        return model

    @staticmethod
    def _apply_address(model: Any, entity: Address) -> None:
        model.address_type = entity.address_type.value
        copy_attributes(model, entity, _ADDRESS_FIELDS)

    @staticmethod
    def _contact_to_entity(model: Any) -> Contact:
        return Contact(
            id=model.id,
            contact_type=ContactType(model.contact_type),
            name=model.name,
            phone_number=model.phone_number,
            email=model.email,
            is_primary=model.is_primary,
        )

    def _contact_to_model(self, entity: Contact) -> Any:
        model = self.contact_model(id=entity.id, contact_type=entity.contact_type.value)
        copy_attributes(model, entity, _CONTACT_FIELDS)
        return model

    @staticmethod
    def _apply_contact(model: Any, entity: Contact) -> None:
        model.contact_type = entity.contact_type.value
        copy_attributes(model, entity, _CONTACT_FIELDS)

    # ── Queries ──────────────────────────────────────────────────────

    async def get_by_id(self, party_id: str) -> Any | None:
        result = await self._session.get(self.model, party_id)
        return self._to_entity(result) if result else None

    async def get_by_ids(self, party_ids: list[str]) -> list[Any]:
        if not party_ids:
            return []
        stmt = (
            select(self.model)
            .where(self.model.id.in_(party_ids))
            .order_by(self.model.code)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def _get_page(
        self,
        *,
        search: str | None,
        party_type: Any,
        status_active: StatusActive | None,
        page: int,
        limit: int,
    ) -> Page[Any]:
        stmt = select(self.model)

        term = search.strip() if search else None
        if term:
            stmt = stmt.where(
                search_clause(term, self.model.name, self.model.code, self.model.npwp_number)
                | self.model.contacts.any(
                    search_clause(
                        term,
                        self.contact_model.name,
                        self.contact_model.phone_number,
                        self.contact_model.email,
                    )
                )
                | self.model.addresses.any(search_clause(term, self.address_model.address_line1))
            )
        if party_type is not None:
            stmt = stmt.where(getattr(self.model, self.type_field) == party_type.value)
        if status_active is not None:
            stmt = stmt.where(self.model.status_active == status_active.value)

        stmt = stmt.order_by(self.model.created_at.desc(), self.model.code.desc())
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def get_last_code(self) -> str | None:
        stmt = (
            select(self.model.code)
            .where(self.model.code.like(f"{self.code_prefix}-%"))
            .order_by(self.model.code.desc())
            .limit(1)
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    # ── Mutations ────────────────────────────────────────────────────

    async def create(self, entity: Any) -> Any:
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: Any) -> Any:
        model = await self._session.get(self.model, entity.id)
        if model is None:
            raise ValueError(f"{self.entity.__name__} {entity.id} not found in database")
        copy_attributes(model, entity, _PARTY_FIELDS)
        model.status_active = entity.status_active.value
        setattr(model, self.type_field, getattr(entity, self.type_field).value)
        model.updated_at = entity.updated_at
        sync_children(
            model.addresses, entity.addresses, self._address_to_model, self._apply_address
        )
        sync_children(
            model.contacts, entity.contacts, self._contact_to_model, self._apply_contact
        )
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, party_id: str) -> bool:
        model = await self._session.get(self.model, party_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True


class SQLAlchemySupplierRepository(_SQLAlchemyPartyRepository, SupplierRepository):
    """Implements the SupplierRepository port using SQLAlchemy async sessions."""

    model = SupplierModel
    address_model = SupplierAddressModel
    contact_model = SupplierContactModel
    entity = Supplier
    type_field = "supplier_type"
    type_enum = SupplierType
    code_prefix = "SU"

    async def get_all(
        self,
        *,
        search: str | None = None,
        supplier_type: SupplierType | None = None,
        status_active: StatusActive | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Supplier]:
        return await self._get_page(
            search=search,
            party_type=supplier_type,
            status_active=status_active,
            page=page,
            limit=limit,
        )


class SQLAlchemyCustomerRepository(_SQLAlchemyPartyRepository, CustomerRepository):
    """Implements the CustomerRepository port using SQLAlchemy async sessions."""

    model = CustomerModel
    address_model = CustomerAddressModel
    contact_model = CustomerContactModel
    entity = Customer
    type_field = "customer_type"
    type_enum = CustomerType
    code_prefix = "CU"

    async def get_all(
        self,
        *,
        search: str | None = None,
        customer_type: CustomerType | None = None,
        status_active: StatusActive | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Customer]:
        return await self._get_page(
            search=search,
            party_type=customer_type,
            status_active=status_active,
            page=page,
            limit=limit,
        )

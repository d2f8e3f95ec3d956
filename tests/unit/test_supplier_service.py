"""Unit tests for the SupplierService."""

import pytest

from backoffice.application.interfaces import MaterialInRepository, SupplierRepository
from backoffice.application.schemas.supplier import SupplierCreate, SupplierUpdate
from backoffice.application.services import SupplierService
from backoffice.domain.entities import (
    AddressType,
    ContactType,
    MaterialIn,
    Page,
    StatusActive,
    Supplier,
    SupplierType,
)
from backoffice.domain.exceptions import (
    BusinessRuleError,
    EntityNotFoundError,
    ReferencedEntityError,
)


class FakeSupplierRepository(SupplierRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._suppliers: dict[str, Supplier] = {}

    async def get_by_id(self, supplier_id):
        return self._suppliers.get(supplier_id)

    async def get_by_ids(self, supplier_ids):
        return [self._suppliers[i] for i in supplier_ids if i in self._suppliers]

    async def get_all(self, *, search=None, supplier_type=None, status_active=None, page=1, limit=10):
        rows = list(self._suppliers.values())
        if search:
            rows = [s for s in rows if search.lower() in f"{s.code} {s.name}".lower()]
        if supplier_type:
            rows = [s for s in rows if s.supplier_type == supplier_type]
        if status_active:
            rows = [s for s in rows if s.status_active == status_active]
        start = (page - 1) * limit
        return Page(data=rows[start : start + limit], total=len(rows), page=page, limit=limit)

    async def get_last_code(self):
        codes = sorted(s.code for s in self._suppliers.values())
        return codes[-1] if codes else None

    async def create(self, supplier):
        self._suppliers[supplier.id] = supplier
        return supplier

    async def update(self, supplier):
        self._suppliers[supplier.id] = supplier
        return supplier

    async def delete(self, supplier_id):
        return self._suppliers.pop(supplier_id, None) is not None


class FakeMaterialInRepository(MaterialInRepository):
    """Only the reference count matters for supplier tests."""

    def __init__(self):
        self.purchases: list[MaterialIn] = []

    async def get_by_id(self, material_in_id):
        return None

    async def get_by_ids(self, material_in_ids):
        return []

    async def get_all(self, **kwargs):
        return Page()

    async def get_last_transaction_no(self, prefix):
        return None

    async def count_by_supplier(self, supplier_id):
        return sum(1 for p in self.purchases if p.supplier_id == supplier_id)

    async def count_items_by_material(self, material_id):
        return 0

    async def create(self, material_in):
        self.purchases.append(material_in)
        return material_in

    async def update(self, material_in):
        return material_in

    async def delete(self, material_in_id):
        return False


def _create(**overrides) -> SupplierCreate:
    values = dict(
        name="Acme Corp",
        supplier_type=SupplierType.MATERIAL,
        addresses=[
            {
                "address_type": AddressType.HEAD_OFFICE,
                "address_line1": "Jl. Sudirman 1",
                "is_primary": True,
            }
        ],
        contacts=[
            {
                "contact_type": ContactType.PRIMARY,
                "name": "Budi",
                "phone_number": "081234567890",
            }
        ],
    )
    values.update(overrides)
    return SupplierCreate(**values)


@pytest.fixture
def material_ins() -> FakeMaterialInRepository:
    return FakeMaterialInRepository()


@pytest.fixture
def service(material_ins) -> SupplierService:
    return SupplierService(FakeSupplierRepository(), material_ins)


@pytest.mark.asyncio
async def test_create_supplier_assigns_sequential_codes(service: SupplierService):
    first = await service.create_supplier(_create())
    second = await service.create_supplier(_create(name="Globex"))
    assert first.code == "SU-00001"
    assert second.code == "SU-00002"
    assert first.status_active == StatusActive.ACTIVE
    assert first.addresses[0].country_code == "ID"


@pytest.mark.asyncio
async def test_create_ignores_client_sub_record_ids(service: SupplierService):
    data = _create()
    data.addresses[0].id = "client-chosen"
    supplier = await service.create_supplier(data)
    assert supplier.addresses[0].id != "client-chosen"


@pytest.mark.asyncio
async def test_get_supplier_not_found(service: SupplierService):
    with pytest.raises(EntityNotFoundError):
        await service.get_supplier("missing")


@pytest.mark.asyncio
async def test_list_suppliers_searches_code_and_name(service: SupplierService):
    await service.create_supplier(_create(name="Acme Corp"))
    await service.create_supplier(_create(name="Globex"))
    page = await service.list_suppliers(search="acme")
    assert page.total == 1
    assert page.data[0].name == "Acme Corp"


@pytest.mark.asyncio
async def test_update_supplier_merges_contacts_by_id(service: SupplierService):
    supplier = await service.create_supplier(_create())
    existing = supplier.contacts[0]
    updated = await service.update_supplier(
        supplier.id,
        SupplierUpdate(
            contacts=[
                {
                    "id": existing.id,
                    "contact_type": ContactType.PRIMARY,
                    "name": "Budi Santoso",
                    "phone_number": "081234567890",
                },
                {
                    "contact_type": ContactType.BILLING,
                    "name": "Sari",
                    "phone_number": "081298765432",
                },
            ]
        ),
    )
    assert [c.name for c in updated.contacts] == ["Budi Santoso", "Sari"]
    assert updated.contacts[0].id == existing.id
    assert len(updated.addresses) == 1


@pytest.mark.asyncio
async def test_update_supplier_rejects_foreign_sub_record(service: SupplierService):
    supplier = await service.create_supplier(_create())
    with pytest.raises(BusinessRuleError):
        await service.update_supplier(
            supplier.id,
            SupplierUpdate(
                contacts=[
                    {
                        "id": "not-ours",
                        "contact_type": ContactType.PRIMARY,
                        "name": "Eve",
                        "phone_number": "081234567890",
                    }
                ]
            ),
        )


@pytest.mark.asyncio
async def test_update_leaves_unsent_fields(service: SupplierService):
    supplier = await service.create_supplier(_create(notes="keep me"))
    updated = await service.update_supplier(supplier.id, SupplierUpdate(name="Acme Ltd"))
    assert updated.name == "Acme Ltd"
    assert updated.notes == "keep me"
    assert updated.code == "SU-00001"


@pytest.mark.asyncio
async def test_delete_referenced_supplier_is_refused(service, material_ins):
    supplier = await service.create_supplier(_create())
    await material_ins.create(
        MaterialIn(transaction_no="MI-202410-0001", supplier_id=supplier.id, supplier_name="Acme")
    )
    with pytest.raises(ReferencedEntityError):
        await service.delete_supplier(supplier.id)
    assert await service.get_supplier(supplier.id) is supplier


@pytest.mark.asyncio
async def test_delete_supplier(service: SupplierService):
    supplier = await service.create_supplier(_create())
    assert await service.delete_supplier(supplier.id) is True
    with pytest.raises(EntityNotFoundError):
        await service.get_supplier(supplier.id)


def test_two_primary_contacts_are_invalid():
    with pytest.raises(ValueError):
        _create(
            contacts=[
                {"contact_type": ContactType.PRIMARY, "name": "A", "phone_number": "081234567890", "is_primary": True},
                {"contact_type": ContactType.BILLING, "name": "B", "phone_number": "081234567891", "is_primary": True},
            ]
        )

"""Unit tests for MaterialInService: totals, numbering and stock bookings."""

from datetime import datetime, timezone

import pytest

from backoffice.application.interfaces import (
    MaterialInRepository,
    MaterialRepository,
    SupplierRepository,
)
from backoffice.application.schemas.material_in import MaterialInCreate, MaterialInUpdate
from backoffice.application.services import MaterialInService
from backoffice.domain.entities import (
    Material,
    MaterialCategory,
    MaterialIn,
    Page,
    StockType,
    Supplier,
    SupplierType,
    Unit,
)
from backoffice.domain.exceptions import BusinessRuleError, EntityNotFoundError


class FakeMaterialRepository(MaterialRepository):

    def __init__(self, materials: list[Material]):
        self._materials = {m.id: m for m in materials}
        self.updates: list[str] = []

    async def get_by_id(self, material_id):
        return self._materials.get(material_id)

    async def get_by_code(self, code):
        return next((m for m in self._materials.values() if m.code == code), None)

    async def get_by_ids(self, material_ids):
        return [self._materials[i] for i in material_ids if i in self._materials]

    async def get_all(self, **kwargs):
        return Page(data=list(self._materials.values()), total=len(self._materials))

    async def create(self, material):
        self._materials[material.id] = material
        return material

    async def update(self, material):
        self.updates.append(material.id)
        self._materials[material.id] = material
        return material

    async def delete(self, material_id):
        return self._materials.pop(material_id, None) is not None


class FakeSupplierRepository(SupplierRepository):

    def __init__(self, suppliers: list[Supplier]):
        self._suppliers = {s.id: s for s in suppliers}

    async def get_by_id(self, supplier_id):
        return self._suppliers.get(supplier_id)

    async def get_by_ids(self, supplier_ids):
        return [self._suppliers[i] for i in supplier_ids if i in self._suppliers]

    async def get_all(self, **kwargs):
        return Page()

    async def get_last_code(self):
        return None

    async def create(self, supplier):
        return supplier

    async def update(self, supplier):
        return supplier

    async def delete(self, supplier_id):
        return False


class FakeMaterialInRepository(MaterialInRepository):

    def __init__(self):
        self._rows: dict[str, MaterialIn] = {}

    async def get_by_id(self, material_in_id):
        return self._rows.get(material_in_id)

    async def get_by_ids(self, material_in_ids):
        return [self._rows[i] for i in material_in_ids if i in self._rows]

    async def get_all(self, **kwargs):
        return Page(data=list(self._rows.values()), total=len(self._rows))

    async def get_last_transaction_no(self, prefix):
        numbers = sorted(r.transaction_no for r in self._rows.values() if r.transaction_no.startswith(prefix))
        return numbers[-1] if numbers else None

    async def count_by_supplier(self, supplier_id):
        return sum(1 for r in self._rows.values() if r.supplier_id == supplier_id)

    async def count_items_by_material(self, material_id):
        return sum(1 for r in self._rows.values() for i in r.items if i.material_id == material_id)

    async def create(self, material_in):
        self._rows[material_in.id] = material_in
        return material_in

    async def update(self, material_in):
        self._rows[material_in.id] = material_in
        return material_in

    async def delete(self, material_in_id):
        return self._rows.pop(material_in_id, None) is not None


OCT_5 = datetime(2024, 10, 5, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def wrap() -> Material:
    return Material(
        code="MAT-001",
        name="Pallet Wrap",
        category=MaterialCategory.PACKAGING,
        unit=Unit.ROLL,
        good_stock=4,
        current_stock=4,
    )


@pytest.fixture
def tape() -> Material:
    return Material(code="MAT-002", name="Tape", category=MaterialCategory.CONSUMABLES, unit=Unit.PCS)


@pytest.fixture
def supplier() -> Supplier:
    return Supplier(code="SU-00001", name="Acme Corp", supplier_type=SupplierType.MATERIAL)


@pytest.fixture
def materials(wrap, tape) -> FakeMaterialRepository:
    return FakeMaterialRepository([wrap, tape])


@pytest.fixture
def service(materials, supplier) -> MaterialInService:
    return MaterialInService(
        FakeMaterialInRepository(), materials, FakeSupplierRepository([supplier])
    )


def _purchase(supplier, wrap, tape, **overrides) -> MaterialInCreate:
    values = dict(
        supplier_id=supplier.id,
        transaction_date=OCT_5,
        total_tax=1000,
        other_costs=500,
        items=[
            {"material_id": wrap.id, "quantity": 3, "unit_price": 15000},
            {"material_id": tape.id, "quantity": 1, "unit_price": 45000, "stock_type": "BAD"},
        ],
    )
    values.update(overrides)
    return MaterialInCreate(**values)


@pytest.mark.asyncio
async def test_create_computes_totals(service, supplier, wrap, tape):
    created = await service.create_material_in(_purchase(supplier, wrap, tape))
    assert [i.total_price for i in created.items] == [45000, 45000]
    assert created.total_amount_before_tax == 90000
    assert created.total_amount == 91500
    assert created.supplier_name == "Acme Corp"
    assert created.items[0].material_code == "MAT-001"


@pytest.mark.asyncio
async def test_create_applies_tax_percentage(service, supplier, wrap, tape):
    created = await service.create_material_in(
        _purchase(supplier, wrap, tape, total_tax=None, tax_percentage=10)
    )
    assert created.total_tax == 9000
    assert created.total_amount == 99500


@pytest.mark.asyncio
async def test_create_books_stock_per_bucket(service, supplier, wrap, tape):
    created = await service.create_material_in(_purchase(supplier, wrap, tape))
    assert (created.items[0].stock_before, created.items[0].stock_after) == (4, 7)
    assert wrap.good_stock == 7
    assert wrap.current_stock == 7
    assert wrap.last_purchase_price == 15000
    assert tape.bad_stock == 1
    assert tape.good_stock == 0


@pytest.mark.asyncio
async def test_transaction_numbers_follow_month(service, supplier, wrap, tape):
    first = await service.create_material_in(_purchase(supplier, wrap, tape))
    second = await service.create_material_in(_purchase(supplier, wrap, tape))
    assert first.transaction_no == "MI-202410-0001"
    assert second.transaction_no == "MI-202410-0002"


@pytest.mark.asyncio
async def test_unknown_material_is_rejected(service, supplier, wrap, tape, materials):
    data = _purchase(
        supplier, wrap, tape, items=[{"material_id": "nope", "quantity": 1, "unit_price": 1}]
    )
    with pytest.raises(EntityNotFoundError):
        await service.create_material_in(data)
    assert materials.updates == []


@pytest.mark.asyncio
async def test_unknown_supplier_is_rejected(service, supplier, wrap, tape):
    with pytest.raises(EntityNotFoundError):
        await service.create_material_in(_purchase(supplier, wrap, tape, supplier_id="ghost"))


@pytest.mark.asyncio
async def test_update_recomputes_grand_total(service, supplier, wrap, tape):
    created = await service.create_material_in(_purchase(supplier, wrap, tape))
    updated = await service.update_material_in(created.id, MaterialInUpdate(other_costs=2500))
    assert updated.total_amount == 93500
    assert updated.transaction_date == OCT_5


@pytest.mark.asyncio
async def test_delete_reverses_stock(service, supplier, wrap, tape):
    created = await service.create_material_in(_purchase(supplier, wrap, tape))
    assert await service.delete_material_in(created.id) is True
    assert wrap.good_stock == 4
    assert tape.bad_stock == 0
    with pytest.raises(EntityNotFoundError):
        await service.get_material_in(created.id)


@pytest.mark.asyncio
async def test_delete_refused_when_stock_already_consumed(service, supplier, wrap, tape):
    created = await service.create_material_in(_purchase(supplier, wrap, tape))
    wrap.book_stock(StockType.GOOD, -6)
    with pytest.raises(BusinessRuleError):
        await service.delete_material_in(created.id)
    assert await service.get_material_in(created.id) is created


def test_tax_percentage_and_amount_are_exclusive():
    with pytest.raises(ValueError):
        MaterialInCreate(
            supplier_id="s",
            tax_percentage=10,
            total_tax=100,
            items=[{"material_id": "m", "quantity": 1, "unit_price": 1}],
        )

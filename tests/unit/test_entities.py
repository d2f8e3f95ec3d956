"""Unit tests for domain entity behaviour."""

from datetime import date

import pytest

from backoffice.domain.entities import (
    CargoType,
    Material,
    MaterialCategory,
    Page,
    ShipmentDetail,
    ShipmentType,
    StockStatus,
    StockType,
    Supplier,
    SupplierType,
    Survey,
    SurveyItem,
    SurveyStatus,
    Unit,
)
from backoffice.domain.exceptions import BusinessRuleError


def _material(**overrides) -> Material:
    values = dict(
        code="MAT-001",
        name="Pallet Wrap",
        category=MaterialCategory.PACKAGING,
        unit=Unit.ROLL,
        minimum_stock=10,
    )
    values.update(overrides)
    return Material(**values)


def _survey() -> Survey:
    return Survey(
        survey_no="SD-S2024100001",
        survey_date=date(2024, 10, 1),
        work_date=date(2024, 10, 3),
        customer_id="c1",
        origin="Jakarta",
        destination="Surabaya",
        cargo_type=CargoType.LCL,
        shipment_type=ShipmentType.DOMESTIC,
        shipment_detail=ShipmentDetail.SEA,
        items=[
            SurveyItem(name="Crate", width=50, length=40, height=30, quantity=2, cbm=0.12),
            SurveyItem(name="Box", width=10, length=10, height=10, quantity=5, cbm=0.005),
        ],
    )


def test_book_stock_moves_bucket_and_total():
    material = _material(current_stock=5, good_stock=5)
    before, after = material.book_stock(StockType.GOOD, 20)
    assert (before, after) == (5, 25)
    assert material.current_stock == 25
    assert material.bad_stock == 0


def test_book_stock_bad_bucket():
    material = _material()
    assert material.book_stock(StockType.BAD, 3) == (0, 3)
    assert material.good_stock == 0
    assert material.current_stock == 3


def test_book_stock_cannot_go_negative():
    material = _material(good_stock=2, current_stock=2)
    with pytest.raises(ValueError):
        material.book_stock(StockType.GOOD, -3)
    assert material.good_stock == 2


@pytest.mark.parametrize(
    "current, maximum, expected",
    [
        (10, None, StockStatus.CRITICAL),
        (15, None, StockStatus.LOW),
        (95, 100, StockStatus.HIGH),
        (50, 100, StockStatus.NORMAL),
    ],
)
def test_stock_status(current, maximum, expected):
    assert _material(current_stock=current, maximum_stock=maximum).stock_status == expected


def test_update_rejects_immutable_field():
    supplier = Supplier(code="SU-00001", name="Acme", supplier_type=SupplierType.MATERIAL)
    with pytest.raises(AttributeError):
        supplier.update(code="SU-00002")


def test_update_rejects_unknown_field():
    supplier = Supplier(code="SU-00001", name="Acme", supplier_type=SupplierType.MATERIAL)
    with pytest.raises(AttributeError):
        supplier.update(colour="blue")


def test_update_rejects_clearing_required_field():
    supplier = Supplier(code="SU-00001", name="Acme", supplier_type=SupplierType.MATERIAL)
    with pytest.raises(BusinessRuleError):
        supplier.update(name=None)
    assert supplier.name == "Acme"


def test_update_refreshes_timestamp():
    supplier = Supplier(code="SU-00001", name="Acme", supplier_type=SupplierType.MATERIAL)
    stamp = supplier.updated_at
    supplier.update(notes="Preferred vendor")
    assert supplier.notes == "Preferred vendor"
    assert supplier.updated_at >= stamp


def test_survey_total_cbm():
    assert _survey().total_cbm == pytest.approx(0.125)


def test_change_status_records_newest_first():
    survey = _survey()
    survey.change_status(SurveyStatus.ONPROGRESS, "alice", "created")
    survey.change_status(SurveyStatus.APPROVED, "bob")
    assert survey.status_survey == SurveyStatus.APPROVED
    assert [h.status for h in survey.status_histories] == [
        SurveyStatus.APPROVED,
        SurveyStatus.ONPROGRESS,
    ]


def test_page_total_pages():
    assert Page(data=[], total=21, page=1, limit=10).total_pages == 3
    assert Page(data=[], total=0, page=1, limit=10).total_pages == 0
    assert Page(data=[], total=21, page=2, limit=10).has_next
    assert not Page(data=[], total=21, page=3, limit=10).has_next

"""Unit tests for the per-module dashboard definitions."""

import ast
from pathlib import Path

import pytest

import backoffice
from backoffice.dashboard.modules import MATERIAL_INS, MODULES, SURVEYS, USERS
from backoffice.dashboard.modules.materials import derive_material_in
from backoffice.dashboard.modules.surveys import derive_survey
from backoffice.reporting import validate_rows
from backoffice.reporting.layouts import EXPORT_LAYOUTS

SURVEY = {
    "id": "sv1",
    "survey_no": "SD-S2024100001",
    "survey_date": "2024-10-01",
    "work_date": "2024-10-03",
    "customer_id": "c1",
    "customer_name": "Sinar Jaya",
    "origin": "Jakarta",
    "destination": "Surabaya",
    "cargo_type": "LCL",
    "shipment_type": "DOMESTIC",
    "shipment_detail": "SEA",
    "status_survey": "ONPROGRESS",
    "total_cbm": 0.12,
    "items": [{"name": "Crate", "width": 50, "length": 40, "height": 30, "quantity": 2, "cbm": 0.12}],
}


def test_every_module_is_registered_by_api_path():
    assert set(MODULES) == {
        "suppliers",
        "customers",
        "materials",
        "material-ins",
        "drivers",
        "employees",
        "vehicles",
        "surveys",
        "provinces",
        "regencies",
        "districts",
        "users",
    }
    assert MODULES["material-ins"].export_prefix == "material_ins"


def test_derive_survey_cbm():
    values = {
        "items": [
            {"name": "Crate", "width": 50, "length": 40, "height": 30, "quantity": 2},
            {"name": "Box", "width": 10, "length": 10, "height": 10, "quantity": None},
        ]
    }
    derive_survey(values)
    assert values["items"][0]["cbm"] == pytest.approx(0.12)
    assert values["items"][1]["cbm"] == 0
    assert values["total_cbm"] == pytest.approx(0.12)


def test_derive_material_in_with_empty_lines():
    values = {"items": [{"material_id": "m1"}], "other_costs": 500}
    derive_material_in(values)
    assert values["items"][0]["total_price"] == 0
    assert values["total_amount"] == 500


def test_survey_presenter_and_csv():
    fields = SURVEYS.presenter(SURVEY)
    assert fields["Total CBM"] == "0.1200"
    assert fields["Survey Date"] == "01 October 2024"

    rows = validate_rows(SURVEYS.row_model, [SURVEY])
    headers = [f.header for f in SURVEYS.csv_fields]
    values = [f.extract(rows[0]) for f in SURVEYS.csv_fields]
    assert dict(zip(headers, values))["Customer"] == "Sinar Jaya"


def test_survey_form_locks_number_and_status():
    form = SURVEYS.build_form(repository=None, notifier=None, entity_id="sv1", defaults=SURVEY)
    assert form.is_disabled("survey_no")
    assert form.is_disabled("status_survey")
    assert form.is_disabled("items.0.cbm")
    assert not form.is_disabled("items.0.width")


def test_purchase_items_fixed_after_creation():
    form = MATERIAL_INS.build_form(repository=None, notifier=None, entity_id="m1", defaults={})
    assert form.is_disabled("items")
    assert form.is_disabled("supplier_id")
    assert not form.is_disabled("invoice_no")


def test_users_have_no_edit_form():
    with pytest.raises(ValueError):
        USERS.build_form(repository=None, notifier=None, entity_id="u1")


def test_modules_export_through_the_shared_layouts():
    assert set(EXPORT_LAYOUTS) == set(MODULES)
    for name, module in MODULES.items():
        assert module.export is EXPORT_LAYOUTS[name]
        assert module.csv_fields is module.export.fields


def test_api_layer_does_not_import_the_dashboard():
    sources = sorted((Path(backoffice.__file__).parent / "presentation").rglob("*.py"))
    assert sources
    offenders = []
    for path in sources:
        for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
            if isinstance(node, ast.ImportFrom):
                names = [node.module or ""]
            elif isinstance(node, ast.Import):
                names = [alias.name for alias in node.names]
            else:
                continue
            offenders += [path.name for name in names if name.startswith("backoffice.dashboard")]
    assert offenders == []

"""Unit tests for EntityForm: locking, derived fields and the submit flow."""

import asyncio
import json

import httpx
import pytest

from backoffice.dashboard.form import FieldLockedError, FormMode, FormState
from backoffice.dashboard.modules import MATERIAL_INS, SUPPLIERS, SURVEYS

SUPPLIER = {
    "id": "s1",
    "code": "SU-00001",
    "name": "Acme Corp",
    "supplier_type": "MATERIAL",
    "status_active": "ACTIVE",
    "notes": None,
    "addresses": [
        {
            "id": "a1",
            "address_type": "HEAD_OFFICE",
            "address_line1": "Jl. Sudirman 1",
            "address_line2": None,
            "country_code": "ID",
            "zipcode": None,
            "province_code": None,
            "regency_code": None,
            "district_code": None,
            "is_primary": True,
        }
    ],
    "contacts": [],
    "created_at": "2024-10-01T08:00:00Z",
    "updated_at": "2024-10-01T08:00:00Z",
}


class FakeApi:
    """Echoes mutations back as ``{message, data}``; can be told to fail."""

    def __init__(self, status_code: int = 200, detail: str | None = None):
        self.status_code = status_code
        self.detail = detail
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json={"detail": self.detail})
        body = json.loads(request.content or b"{}")
        if request.method == "POST":
            return httpx.Response(201, json={"message": "Created", "data": {"id": "new", **body}})
        return httpx.Response(
            200, json={"message": "Supplier updated successfully", "data": {**SUPPLIER, **body}}
        )

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def edit_form(api, repository_for, notifier):
    form = SUPPLIERS.build_form(
        repository_for("suppliers", api), notifier, entity_id="s1", defaults=SUPPLIER
    )
    form.open()
    return form


def _purchase_form(api, repository_for, notifier):
    form = MATERIAL_INS.build_form(repository_for("material-ins", api), notifier)
    form.open()
    form.set_value("supplier_id", "s1")
    form.add_line("items", {"material_id": "m1", "quantity": 3, "unit_price": 15000})
    form.add_line("items", {"material_id": "m2", "quantity": 1, "unit_price": 45000})
    form.set_value("total_tax", 1000)
    form.set_value("other_costs", 500)
    return form


def test_derived_totals_follow_inputs(api, repository_for, notifier):
    form = _purchase_form(api, repository_for, notifier)
    assert form.mode is FormMode.CREATE
    assert form.get("items.0.total_price") == 45000
    assert form.get("total_amount_before_tax") == 90000
    assert form.get("total_amount") == 91500

    form.set_value("items.0.quantity", 4)
    assert form.get("items.0.total_price") == 60000
    assert form.get("total_amount") == 106500

    form.remove_line("items", 1)
    assert form.get("total_amount") == 61500


def test_tax_percentage_overrides_amount(api, repository_for, notifier):
    form = _purchase_form(api, repository_for, notifier)
    form.set_value("total_tax", None)
    form.set_value("tax_percentage", 10)
    assert form.get("tax_amount") == 9000
    assert form.get("total_amount") == 99500


def test_non_numeric_dimension_is_a_field_error(api, repository_for, notifier):
    form = SURVEYS.build_form(repository_for("surveys", api), notifier)
    form.open()
    form.add_line("items", {"name": "Crate", "width": 50, "length": 40, "height": 30, "quantity": 2})
    assert form.get("total_cbm") == 0.12

    form.set_value("items.0.width", "5o")

    assert form.get("items.0.width") == "5o"
    assert "items.0.width" in form.errors
    assert form.dirty
    assert not form.can_submit


def test_non_numeric_quantity_keeps_form_usable(api, repository_for, notifier):
    form = _purchase_form(api, repository_for, notifier)
    form.set_value("items.0.quantity", "three")
    assert "items.0.quantity" in form.errors

    form.set_value("items.0.quantity", 4)
    assert "items.0.quantity" not in form.errors
    assert form.get("total_amount") == 106500


def test_derived_fields_are_locked(api, repository_for, notifier):
    form = _purchase_form(api, repository_for, notifier)
    assert form.is_disabled("items.1.total_price")
    with pytest.raises(FieldLockedError):
        form.set_value("items.1.total_price", 1)
    with pytest.raises(FieldLockedError):
        form.set_value("total_amount", 1)


@pytest.mark.asyncio
async def test_create_sends_only_schema_fields(api, repository_for, notifier):
    saved = []
    form = MATERIAL_INS.build_form(
        repository_for("material-ins", api), notifier, on_success=saved.append
    )
    form.open()
    form.set_value("supplier_id", "s1")
    form.add_line("items", {"material_id": "m1", "quantity": 3, "unit_price": 15000})
    assert form.can_submit

    result = await form.submit()
    body = api.last_body
    assert "total_amount" not in body
    assert "total_price" not in body["items"][0]
    assert result["id"] == "new"
    assert saved == [result]
    assert form.state is FormState.IDLE
    assert notifier.last.message == "Created"


@pytest.mark.asyncio
async def test_invalid_form_cannot_submit(api, repository_for, notifier):
    form = MATERIAL_INS.build_form(repository_for("material-ins", api), notifier)
    form.open()
    form.set_value("supplier_id", "s1")
    assert "items" in form.errors
    assert await form.submit() is None
    assert api.requests == []


def test_immutable_field_locked_in_edit_mode(edit_form):
    assert edit_form.mode is FormMode.EDIT
    assert edit_form.is_disabled("code")
    with pytest.raises(FieldLockedError):
        edit_form.set_value("code", "SU-00099")
    assert not edit_form.is_disabled("name")


def test_edit_form_needs_changes_before_submit(edit_form):
    assert edit_form.valid
    assert not edit_form.can_submit
    edit_form.set_value("name", "Acme Ltd")
    assert edit_form.can_submit


@pytest.mark.asyncio
async def test_edit_submit_refreshes_defaults(edit_form, api, notifier):
    edit_form.set_value("notes", "Preferred vendor")
    result = await edit_form.submit()

    request = api.requests[-1]
    assert request.method == "PUT"
    assert request.url.path.endswith("/suppliers/s1")
    assert "code" not in api.last_body
    assert api.last_body["addresses"][0]["id"] == "a1"
    assert result["notes"] == "Preferred vendor"
    assert edit_form.get("notes") == "Preferred vendor"
    assert edit_form.dirty is False
    assert notifier.last.message == "Supplier updated successfully"


@pytest.mark.asyncio
async def test_late_load_does_not_clobber_edits(edit_form):
    edit_form.set_value("name", "Typed by user")
    assert edit_form.load_entity({**SUPPLIER, "name": "From server"}) is False
    assert edit_form.get("name") == "Typed by user"


def test_load_entity_when_clean(edit_form):
    assert edit_form.load_entity({**SUPPLIER, "name": "From server"}) is True
    assert edit_form.get("name") == "From server"


@pytest.mark.asyncio
async def test_remote_error_keeps_values(repository_for, notifier):
    api = FakeApi(409, "Supplier with code='SU-00001' already exists")
    form = SUPPLIERS.build_form(
        repository_for("suppliers", api), notifier, entity_id="s1", defaults=SUPPLIER
    )
    form.open()
    form.set_value("name", "Acme Ltd")

    assert await form.submit() is None
    assert form.state is FormState.EDITING
    assert form.dirty is True
    assert form.get("name") == "Acme Ltd"
    assert notifier.last.message == "Supplier with code='SU-00001' already exists"


@pytest.mark.asyncio
async def test_only_one_submit_in_flight(edit_form, api):
    edit_form.set_value("name", "Acme Ltd")
    results = await asyncio.gather(edit_form.submit(), edit_form.submit())
    assert len(api.requests) == 1
    assert sum(1 for r in results if r is not None) == 1


def test_cancel_asks_before_discarding(api, repository_for, notifier):
    answers = [False, True]
    form = SUPPLIERS.build_form(
        repository_for("suppliers", api),
        notifier,
        entity_id="s1",
        defaults=SUPPLIER,
        confirm=lambda message: answers.pop(0),
    )
    form.open()
    form.set_value("name", "Acme Ltd")
    assert form.cancel() is False
    assert form.get("name") == "Acme Ltd"
    assert form.cancel() is True
    assert form.get("name") == "Acme Corp"
    assert form.state is FormState.IDLE

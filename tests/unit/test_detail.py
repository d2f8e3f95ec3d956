"""Unit tests for the detail view state machine."""

import asyncio

import httpx
import pytest

from backoffice.dashboard.detail import DetailState, DetailView
from backoffice.dashboard.modules import SURVEYS, VEHICLES

VEHICLE = {
    "id": "v1",
    "vehicle_number": "B 1234 XY",
    "vehicle_type": "TRUCK",
    "vehicle_make": None,
}


def _handler(status_code: int, body: dict):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return handler


@pytest.mark.asyncio
async def test_open_success_fills_placeholders(repository_for):
    repository = repository_for("vehicles", _handler(200, VEHICLE))
    view = DetailView(repository, lambda e: {"Number": e["vehicle_number"], "Make": e["vehicle_make"]})
    assert await view.open("v1") is DetailState.SUCCESS
    assert view.fields == {"Number": "B 1234 XY", "Make": "-"}
    assert view.entity == VEHICLE


@pytest.mark.asyncio
async def test_not_found_state(repository_for):
    repository = repository_for("vehicles", _handler(404, {"detail": "Vehicle with id 'x' not found"}))
    view = VEHICLES.build_detail(repository)
    assert await view.open("x") is DetailState.NOT_FOUND
    assert view.fields == {}


@pytest.mark.asyncio
async def test_error_then_retry(repository_for):
    responses = [httpx.Response(400, json={"detail": "bad id"}), httpx.Response(200, json=VEHICLE)]
    repository = repository_for("vehicles", lambda request: responses.pop(0))
    view = DetailView(repository, lambda e: {"Number": e["vehicle_number"]})
    assert await view.open("v1") is DetailState.ERROR
    assert view.error == "bad id"
    assert await view.retry() is DetailState.SUCCESS
    assert view.error is None


@pytest.mark.asyncio
async def test_retry_while_closed_does_nothing(repository_for):
    calls = []
    repository = repository_for("vehicles", lambda r: calls.append(r) or httpx.Response(200, json=VEHICLE))
    view = DetailView(repository, lambda e: {})
    assert await view.retry() is DetailState.CLOSED
    assert calls == []


@pytest.mark.asyncio
async def test_close_drops_late_response(repository_for):
    release = asyncio.Event()

    async def slow_get(entity_id, *, refresh=False):
        await release.wait()
        return VEHICLE

    repository = repository_for("vehicles", _handler(200, VEHICLE))
    repository.get = slow_get
    view = DetailView(repository, lambda e: {"Number": e["vehicle_number"]})

    pending = asyncio.create_task(view.open("v1"))
    await asyncio.sleep(0)
    assert view.state is DetailState.LOADING
    view.close()
    release.set()
    await pending

    assert view.state is DetailState.CLOSED
    assert view.fields == {}


def test_go_back_closes_and_calls_back(repository_for):
    went_back = []
    repository = repository_for("vehicles", _handler(200, VEHICLE))
    view = DetailView(repository, lambda e: {}, on_back=lambda: went_back.append(True))
    view.go_back()
    assert view.state is DetailState.CLOSED
    assert went_back == [True]


SURVEY = {
    "id": "sv1",
    "survey_no": "SD-S2024100001",
    "customer_id": "c1",
    "origin": "Jakarta",
    "destination": "Surabaya",
    "cargo_type": "LCL",
    "shipment_type": "DOMESTIC",
    "shipment_detail": "SEA",
    "status_survey": "ONPROGRESS",
    "items": [{"width": 50, "length": 40, "height": 30, "quantity": 2, "cbm": 0.12}],
}


@pytest.mark.asyncio
async def test_missing_nested_value_renders_placeholder(repository_for):
    view = SURVEYS.build_detail(repository_for("surveys", _handler(200, SURVEY)))
    assert await view.open("sv1") is DetailState.SUCCESS
    assert view.fields["Customer"] == "-"
    assert view.fields["Item 1"].startswith("-: 50×40×30 cm")


@pytest.mark.asyncio
async def test_unpresentable_payload_is_an_error_state(repository_for):
    broken = {key: value for key, value in SURVEY.items() if key != "origin"}
    view = SURVEYS.build_detail(repository_for("surveys", _handler(200, broken)))
    assert await view.open("sv1") is DetailState.ERROR
    assert view.error == "This record could not be displayed."
    assert view.fields == {}

"""Unit tests for the dashboard ApiClient, endpoint envelope and read cache."""

import json

import httpx
import pytest

from backoffice.dashboard.client import GENERIC_ERROR_MESSAGE, RemotePage
from backoffice.domain.exceptions import (
    RemoteConflictError,
    RemoteNotFoundError,
    RemoteRequestError,
    RemoteValidationError,
)


# ── Helpers ──


def _page_payload(rows, total=None):
    return {"data": rows, "total": len(rows) if total is None else total, "page": 1, "totalPages": 1}


class Recorder:
    """Handler that replays queued responses and records every request."""

    def __init__(self, *responses: httpx.Response):
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]


# ── Tests ──


@pytest.mark.asyncio
async def test_read_retries_server_errors(client_for, monkeypatch):
    monkeypatch.setattr("backoffice.dashboard.client._RETRY_DELAY", 0)
    recorder = Recorder(
        httpx.Response(503, json={"detail": "busy"}),
        httpx.Response(200, json={"ok": True}),
    )
    client = client_for(recorder, read_retries=2)
    assert await client.read("suppliers") == {"ok": True}
    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_read_gives_up_after_retries(client_for, monkeypatch):
    monkeypatch.setattr("backoffice.dashboard.client._RETRY_DELAY", 0)
    recorder = Recorder(httpx.Response(500, json={"detail": "boom"}))
    client = client_for(recorder, read_retries=2)
    with pytest.raises(RemoteRequestError) as excinfo:
        await client.read("suppliers")
    assert excinfo.value.status_code == 500
    assert len(recorder.requests) == 3


@pytest.mark.asyncio
async def test_read_does_not_retry_client_errors(client_for):
    recorder = Recorder(httpx.Response(404, json={"detail": "Supplier with id 'x' not found"}))
    client = client_for(recorder, read_retries=2)
    with pytest.raises(RemoteNotFoundError) as excinfo:
        await client.read("suppliers/x")
    assert excinfo.value.message == "Supplier with id 'x' not found"
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_writes_are_never_retried(client_for):
    recorder = Recorder(httpx.Response(502, text="bad gateway"))
    client = client_for(recorder, read_retries=3)
    with pytest.raises(RemoteRequestError) as excinfo:
        await client.write("POST", "suppliers", {"name": "Acme"})
    assert excinfo.value.message == GENERIC_ERROR_MESSAGE
    assert len(recorder.requests) == 1
    assert json.loads(recorder.requests[0].content) == {"name": "Acme"}


@pytest.mark.asyncio
async def test_transport_failure_becomes_remote_error(client_for):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    client = client_for(handler)
    with pytest.raises(RemoteRequestError) as excinfo:
        await client.write("DELETE", "suppliers/1")
    assert excinfo.value.status_code is None


@pytest.mark.asyncio
async def test_validation_detail_is_flattened(client_for):
    detail = [
        {"loc": ["body", "name"], "msg": "Field required", "type": "missing"},
        {"loc": ["body", "contacts", 0, "phone_number"], "msg": "String too short", "type": "x"},
    ]
    client = client_for(Recorder(httpx.Response(422, json={"detail": detail})))
    with pytest.raises(RemoteValidationError) as excinfo:
        await client.write("POST", "suppliers", {})
    assert excinfo.value.message == (
        "name: Field required; contacts.0.phone_number: String too short"
    )


@pytest.mark.asyncio
async def test_conflict_maps_to_conflict_error(client_for):
    client = client_for(Recorder(httpx.Response(409, json={"detail": "still referenced"})))
    with pytest.raises(RemoteConflictError):
        await client.write("DELETE", "suppliers/1")


def test_remote_page_reads_envelope():
    page = RemotePage.from_payload({"data": [{"id": "1"}], "total": 3, "page": 1, "totalPages": 1})
    assert page.total_pages == 1
    assert page.has_more is True
    assert RemotePage.from_payload({}).data == []


@pytest.mark.asyncio
async def test_endpoint_builds_urls_and_query(repository_for):
    recorder = Recorder(httpx.Response(200, json=_page_payload([{"id": "1"}])))
    repository = repository_for("suppliers", recorder)
    page = await repository.list({"page": 2, "limit": 10, "search": "acme"})
    request = recorder.requests[0]
    assert request.url.path == "/api/v1/suppliers"
    assert request.url.params["search"] == "acme"
    assert page.data == [{"id": "1"}]


@pytest.mark.asyncio
async def test_list_cache_until_invalidated(repository_for):
    recorder = Recorder(httpx.Response(200, json=_page_payload([{"id": "1"}])))
    repository = repository_for("suppliers", recorder)
    await repository.list({"page": 1, "limit": 10})
    await repository.list({"limit": 10, "page": 1})
    assert len(recorder.requests) == 1
    repository.invalidate_list()
    await repository.list({"page": 1, "limit": 10})
    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_entity_cache_and_refresh(repository_for):
    recorder = Recorder(httpx.Response(200, json={"id": "1", "name": "Acme"}))
    repository = repository_for("suppliers", recorder)
    await repository.get("1")
    await repository.get("1")
    assert len(recorder.requests) == 1
    assert repository.cached_entity("1") == {"id": "1", "name": "Acme"}
    await repository.get("1", refresh=True)
    assert len(recorder.requests) == 2
    repository.invalidate_by_id("1")
    assert repository.cached_entity("1") is None


@pytest.mark.asyncio
async def test_mutation_envelope(repository_for):
    recorder = Recorder(
        httpx.Response(201, json={"message": "Supplier created successfully", "data": {"id": "9"}})
    )
    repository = repository_for("suppliers", recorder)
    result = await repository.create({"name": "Acme"})
    assert result.message == "Supplier created successfully"
    assert result.data == {"id": "9"}
    assert recorder.requests[0].method == "POST"

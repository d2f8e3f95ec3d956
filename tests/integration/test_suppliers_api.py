"""Integration tests for the supplier endpoints on a real (in-memory) database."""

import csv
import io

import pytest

API = "/api/v1"


async def _create(client, payload) -> dict:
    response = await client.post(f"{API}/suppliers", json=payload)
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["message"] == "Supplier created successfully"
    return body["data"]


@pytest.mark.asyncio
async def test_create_and_get_supplier(client, supplier_payload):
    created = await _create(client, supplier_payload())
    assert created["code"] == "SU-00001"
    assert created["status_active"] == "ACTIVE"
    assert created["contacts"][0]["name"] == "Budi"

    response = await client.get(f"{API}/suppliers/{created['id']}")
    assert response.status_code == 200
    assert response.json()["addresses"][0]["address_line1"] == "Jl. Sudirman 1"


@pytest.mark.asyncio
async def test_next_code_preview(client, supplier_payload):
    await _create(client, supplier_payload())
    response = await client.get(f"{API}/suppliers/next-code")
    assert response.json() == {"code": "SU-00002"}


@pytest.mark.asyncio
async def test_search_returns_paginated_envelope(client, supplier_payload):
    await _create(client, supplier_payload("Acme Corp"))
    await _create(client, supplier_payload("Globex Logistics"))

    response = await client.get(f"{API}/suppliers", params={"search": "ACME"})
    body = response.json()
    assert body["total"] == 1
    assert body["page"] == 1
    assert body["totalPages"] == 1
    assert body["data"][0]["name"] == "Acme Corp"


@pytest.mark.asyncio
async def test_pagination(client, supplier_payload):
    for number in range(12):
        await _create(client, supplier_payload(f"Supplier {number}"))
    body = (await client.get(f"{API}/suppliers", params={"page": 2, "limit": 5})).json()
    assert body["total"] == 12
    assert body["totalPages"] == 3
    assert len(body["data"]) == 5


@pytest.mark.asyncio
async def test_limit_is_capped(client):
    response = await client.get(f"{API}/suppliers", params={"limit": 1000})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_invalid_phone_is_rejected(client, supplier_payload):
    payload = supplier_payload()
    payload["contacts"][0]["phone_number"] = "12"
    response = await client.post(f"{API}/suppliers", json=payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_syncs_contacts(client, supplier_payload):
    created = await _create(client, supplier_payload())
    contact = created["contacts"][0]
    response = await client.put(
        f"{API}/suppliers/{created['id']}",
        json={
            "notes": "Preferred vendor",
            "contacts": [
                {**contact, "name": "Budi Santoso"},
                {"contact_type": "BILLING", "name": "Sari", "phone_number": "081298765432"},
            ],
        },
    )
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["notes"] == "Preferred vendor"
    assert {c["name"] for c in data["contacts"]} == {"Budi Santoso", "Sari"}
    assert contact["id"] in {c["id"] for c in data["contacts"]}
    assert len(data["addresses"]) == 1


@pytest.mark.asyncio
async def test_code_cannot_be_changed(client, supplier_payload):
    created = await _create(client, supplier_payload())
    response = await client.put(f"{API}/suppliers/{created['id']}", json={"code": "SU-99999"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_missing_supplier_is_404(client):
    response = await client.get(f"{API}/suppliers/does-not-exist")
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_delete_supplier(client, supplier_payload):
    created = await _create(client, supplier_payload())
    response = await client.delete(f"{API}/suppliers/{created['id']}")
    assert response.json() == {"message": "Supplier deleted successfully"}
    assert (await client.get(f"{API}/suppliers/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_export_selected_suppliers(client, supplier_payload):
    acme = await _create(client, supplier_payload("Acme, Inc."))
    await _create(client, supplier_payload("Globex"))

    response = await client.get(f"{API}/suppliers/export", params={"ids": [acme["id"]]})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="suppliers_' in response.headers["content-disposition"]

    rows = list(csv.reader(io.StringIO(response.text, newline="")))
    assert rows[0][:2] == ["Code", "Name"]
    assert rows[1][:2] == ["SU-00001", "Acme, Inc."]
    assert len(rows) == 2


@pytest.mark.asyncio
async def test_export_with_unknown_ids_is_400(client):
    response = await client.get(f"{API}/suppliers/export", params={"ids": ["nope"]})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_search_wildcards_match_literally(client, supplier_payload):
    for name in ("Diskon 50% Jaya", "Gudang 500 Jaya", "A_B Trading", "AXB Trading"):
        assert (await client.post(f"{API}/suppliers", json=supplier_payload(name))).status_code == 201

    body = (await client.get(f"{API}/suppliers", params={"search": "50%"})).json()
    assert [s["name"] for s in body["data"]] == ["Diskon 50% Jaya"]
    body = (await client.get(f"{API}/suppliers", params={"search": "a_b"})).json()
    assert [s["name"] for s in body["data"]] == ["A_B Trading"]

"""Integration tests for province / regency / district reference data."""

import pytest

API = "/api/v1"


async def _seed(client):
    await client.post(f"{API}/provinces/bulk", json=[{"code": "32", "name": "JAWA BARAT"}])
    await client.post(
        f"{API}/regencies/bulk",
        json=[
            {"code": "32.73", "name": "KOTA BANDUNG", "province_code": "32"},
            {"code": "32.04", "name": "KABUPATEN BANDUNG", "province_code": "32"},
        ],
    )
    await client.post(
        f"{API}/districts/bulk",
        json=[{"code": "32.73.01", "name": "SUKASARI", "regency_code": "32.73"}],
    )


@pytest.mark.asyncio
async def test_bulk_upload_reports_count(client):
    response = await client.post(
        f"{API}/provinces/bulk",
        json=[{"code": "31", "name": "DKI JAKARTA"}, {"code": "32", "name": "JAWA BARAT"}],
    )
    assert response.status_code == 200, response.text
    assert response.json()["count"] == 2

    again = await client.post(f"{API}/provinces/bulk", json=[{"code": "31", "name": "DKI"}])
    assert again.json()["count"] == 1
    listed = (await client.get(f"{API}/provinces")).json()
    assert listed["total"] == 2
    assert (await client.get(f"{API}/provinces/31")).json()["name"] == "DKI"


@pytest.mark.asyncio
async def test_bulk_with_unknown_parent_is_rejected(client):
    response = await client.post(
        f"{API}/regencies/bulk",
        json=[{"code": "35.78", "name": "KOTA SURABAYA", "province_code": "35"}],
    )
    assert response.status_code == 400
    assert "35" in response.json()["detail"]


@pytest.mark.asyncio
async def test_filter_children_by_parent(client):
    await _seed(client)
    body = (await client.get(f"{API}/regencies", params={"province_code": "32"})).json()
    assert body["total"] == 2
    body = (await client.get(f"{API}/districts", params={"regency_code": "32.73"})).json()
    assert [d["code"] for d in body["data"]] == ["32.73.01"]
    body = (await client.get(f"{API}/regencies", params={"search": "kota"})).json()
    assert body["total"] == 1


@pytest.mark.asyncio
async def test_parent_with_children_cannot_be_deleted(client):
    await _seed(client)
    assert (await client.delete(f"{API}/provinces/32")).status_code == 409
    assert (await client.delete(f"{API}/regencies/32.73")).status_code == 409
    assert (await client.delete(f"{API}/regencies/32.04")).status_code == 200


@pytest.mark.asyncio
async def test_create_update_and_duplicate(client):
    created = await client.post(f"{API}/provinces", json={"code": "33", "name": "JATENG"})
    assert created.status_code == 201
    assert created.json()["data"]["id"] == "33"
    assert (await client.post(f"{API}/provinces", json={"code": "33", "name": "X"})).status_code == 409

    updated = await client.put(f"{API}/provinces/33", json={"name": "JAWA TENGAH"})
    assert updated.json()["data"]["name"] == "JAWA TENGAH"
    assert (await client.put(f"{API}/provinces/33", json={"code": "34"})).status_code == 422


@pytest.mark.asyncio
async def test_export_regencies(client):
    await _seed(client)
    response = await client.get(f"{API}/regencies/export", params={"ids": ["32.73"]})
    assert response.status_code == 200
    assert "KOTA BANDUNG" in response.text
    assert "KABUPATEN" not in response.text

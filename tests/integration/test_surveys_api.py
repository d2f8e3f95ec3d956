"""Integration tests for surveys: numbering, CBM, status workflow and stats."""

import pytest
import pytest_asyncio

API = "/api/v1"


@pytest.fixture
def customer_payload():
    return {
        "name": "Sinar Jaya",
        "customer_type": "CORPORATE",
        "contacts": [{"contact_type": "PRIMARY", "name": "Rina", "phone_number": "081311112222"}],
    }


async def _create_survey(client, customer_id: str, **overrides) -> dict:
    payload = {
        "survey_date": "2024-10-01",
        "work_date": "2024-10-03",
        "customer_id": customer_id,
        "origin": "Jakarta",
        "destination": "Surabaya",
        "cargo_type": "LCL",
        "shipment_type": "DOMESTIC",
        "shipment_detail": "SEA",
        "created_by": "alice",
        "items": [{"name": "Crate", "width": 50, "length": 40, "height": 30, "quantity": 2}],
    }
    payload.update(overrides)
    response = await client.post(f"{API}/surveys", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest_asyncio.fixture
async def customer(client, customer_payload):
    response = await client.post(f"{API}/customers", json=customer_payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_survey(client, customer):
    survey = await _create_survey(client, customer["id"])
    assert survey["survey_no"].startswith("SD-S")
    assert survey["survey_no"].endswith("0001")
    assert survey["customer_name"] == "Sinar Jaya"
    assert survey["items"][0]["cbm"] == pytest.approx(0.12)
    assert survey["total_cbm"] == pytest.approx(0.12)
    assert survey["status_survey"] == "ONPROGRESS"
    assert len(survey["status_histories"]) == 1


@pytest.mark.asyncio
async def test_client_cbm_is_ignored(client, customer):
    survey = await _create_survey(
        client,
        customer["id"],
        items=[{"name": "Box", "width": 100, "length": 100, "height": 100, "quantity": 1, "cbm": 42}],
    )
    assert survey["items"][0]["cbm"] == pytest.approx(1.0)


@pytest.mark.asyncio
async def test_status_change_and_history(client, customer):
    survey = await _create_survey(client, customer["id"])
    response = await client.patch(
        f"{API}/surveys/{survey['id']}/status",
        json={"status": "APPROVED", "changed_by": "bob", "remarks": "Looks good"},
    )
    assert response.status_code == 200, response.text
    assert response.json()["data"]["status_survey"] == "APPROVED"

    history = (await client.get(f"{API}/surveys/{survey['id']}/status-history")).json()
    assert [h["status"] for h in history] == ["APPROVED", "ONPROGRESS"]
    assert history[0]["changed_by"] == "bob"


@pytest.mark.asyncio
async def test_status_cannot_be_set_through_update(client, customer):
    survey = await _create_survey(client, customer["id"])
    response = await client.put(f"{API}/surveys/{survey['id']}", json={"status_survey": "APPROVED"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_replaces_items(client, customer):
    survey = await _create_survey(client, customer["id"])
    response = await client.put(
        f"{API}/surveys/{survey['id']}",
        json={
            "destination": "Makassar",
            "items": [{"name": "Pallet", "width": 100, "length": 120, "height": 100, "quantity": 2}],
        },
    )
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["destination"] == "Makassar"
    assert [i["name"] for i in data["items"]] == ["Pallet"]
    assert data["total_cbm"] == pytest.approx(2.4)
    assert data["survey_no"] == survey["survey_no"]


@pytest.mark.asyncio
async def test_stats(client, customer):
    first = await _create_survey(client, customer["id"])
    await _create_survey(client, customer["id"])
    await client.patch(f"{API}/surveys/{first['id']}/status", json={"status": "REJECT"})

    stats = (await client.get(f"{API}/surveys/stats")).json()
    assert stats["total_surveys"] == 2
    assert stats["today_surveys"] == 2
    assert stats["this_month_surveys"] == 2
    assert stats["status_breakdown"] == {"on_progress": 1, "approved": 0, "rejected": 1}


@pytest.mark.asyncio
async def test_list_filter_by_status_and_search(client, customer):
    first = await _create_survey(client, customer["id"])
    await _create_survey(client, customer["id"], destination="Medan")
    await client.patch(f"{API}/surveys/{first['id']}/status", json={"status": "APPROVED"})

    approved = (await client.get(f"{API}/surveys", params={"status_survey": "APPROVED"})).json()
    assert [s["id"] for s in approved["data"]] == [first["id"]]
    medan = (await client.get(f"{API}/surveys", params={"search": "medan"})).json()
    assert medan["total"] == 1
    by_customer = (await client.get(f"{API}/surveys", params={"search": "sinar"})).json()
    assert by_customer["total"] == 2


@pytest.mark.asyncio
async def test_customer_with_surveys_cannot_be_deleted(client, customer):
    survey = await _create_survey(client, customer["id"])
    assert (await client.delete(f"{API}/customers/{customer['id']}")).status_code == 409
    assert (await client.delete(f"{API}/surveys/{survey['id']}")).status_code == 200
    assert (await client.delete(f"{API}/customers/{customer['id']}")).status_code == 200


@pytest.mark.asyncio
async def test_survey_for_unknown_customer(client):
    response = await client.post(
        f"{API}/surveys",
        json={
            "survey_date": "2024-10-01",
            "work_date": "2024-10-03",
            "customer_id": "ghost",
            "origin": "A",
            "destination": "B",
            "cargo_type": "FCL",
            "shipment_type": "INTERNATIONAL",
            "shipment_detail": "AIR",
            "items": [{"name": "Box", "width": 1, "length": 1, "height": 1, "quantity": 1}],
        },
    )
    assert response.status_code == 404

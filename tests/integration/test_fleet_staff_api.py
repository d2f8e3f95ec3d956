"""Integration tests for drivers, vehicles and employees."""

import pytest

API = "/api/v1"

DRIVER = {
    "code": "DRV-01",
    "name": "Slamet Riyadi",
    "gender": "MALE",
    "address_line1": "Jl. Merdeka 5",
    "city": "Bandung",
    "phone_number": "081298765432",
}

EMPLOYEE = {
    "nik": "EMP-001",
    "name": "Sari Dewi",
    "gender": "FEMALE",
    "address": "Jl. Asia Afrika 10",
    "city": "Bandung",
    "zipcode": "40111",
    "phone_number": "081211112222",
    "employments": [
        {
            "start_date": "2020-01-06",
            "end_date": "2022-12-31",
            "position": "Staff",
            "division": "Warehouse",
        },
        {"start_date": "2023-01-02", "position": "Supervisor", "division": "Finance"},
    ],
}


@pytest.mark.asyncio
async def test_driver_lifecycle(client):
    created = await client.post(f"{API}/drivers", json=DRIVER)
    assert created.status_code == 201, created.text
    driver = created.json()["data"]
    assert driver["status_active"] is True

    assert (await client.post(f"{API}/drivers", json=DRIVER)).status_code == 409

    updated = await client.put(f"{API}/drivers/{driver['id']}", json={"status_active": False})
    assert updated.json()["data"]["status_active"] is False
    assert (await client.put(f"{API}/drivers/{driver['id']}", json={"code": "X"})).status_code == 422

    body = (await client.get(f"{API}/drivers", params={"status_active": False})).json()
    assert body["total"] == 1
    body = (await client.get(f"{API}/drivers", params={"search": "bandung"})).json()
    assert body["total"] == 1

    assert (await client.delete(f"{API}/drivers/{driver['id']}")).status_code == 200
    assert (await client.get(f"{API}/drivers/{driver['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_vehicle_number_is_unique_and_searchable(client):
    payload = {"vehicle_number": "D 1234 ABC", "vehicle_type": "WINGBOX", "vehicle_make": "Hino"}
    created = await client.post(f"{API}/vehicles", json=payload)
    assert created.status_code == 201, created.text
    assert (await client.post(f"{API}/vehicles", json=payload)).status_code == 409

    bad = await client.post(f"{API}/vehicles", json={**payload, "vehicle_year": "20x4"})
    assert bad.status_code == 422

    body = (await client.get(f"{API}/vehicles", params={"search": "hino"})).json()
    assert [v["vehicle_number"] for v in body["data"]] == ["D 1234 ABC"]
    body = (await client.get(f"{API}/vehicles", params={"vehicle_type": "TRUCK"})).json()
    assert body["total"] == 0


@pytest.mark.asyncio
async def test_employee_current_employment(client):
    created = await client.post(f"{API}/employees", json=EMPLOYEE)
    assert created.status_code == 201, created.text
    employee = created.json()["data"]
    assert len(employee["employments"]) == 2
    assert employee["current_employment"]["position"] == "Supervisor"

    body = (await client.get(f"{API}/employees", params={"search": "finance"})).json()
    assert body["total"] == 1

    export = await client.get(f"{API}/employees/export", params={"ids": [employee["id"]]})
    assert export.status_code == 200
    assert "Supervisor" in export.text


@pytest.mark.asyncio
async def test_employee_with_two_open_employments_is_rejected(client):
    employments = [
        {"start_date": "2020-01-06", "position": "Staff", "division": "Warehouse"},
        {"start_date": "2023-01-02", "position": "Supervisor", "division": "Finance"},
    ]
    response = await client.post(f"{API}/employees", json={**EMPLOYEE, "employments": employments})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_customer_next_code_preview(client):
    assert (await client.get(f"{API}/customers/next-code")).json()["code"] == "CU-00001"
    created = await client.post(
        f"{API}/customers",
        json={"name": "Sinar Jaya", "customer_type": "CORPORATE"},
    )
    assert created.status_code == 201, created.text
    assert created.json()["data"]["code"] == "CU-00001"
    assert (await client.get(f"{API}/customers/next-code")).json()["code"] == "CU-00002"

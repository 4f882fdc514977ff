"""HTTP tests for clients, employees and ID parsing."""

import re
from datetime import datetime, timezone


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def test_manager_creates_clients_with_sequential_codes(client, manager_token):
    yy = datetime.now(timezone.utc).year % 100

    first = await client.post(
        "/api/v1/clients",
        json={"name": "Accra Motors", "email": "ads@accramotors.com", "contract_amount": "1200.50"},
        headers=bearer(manager_token),
    )
    second = await client.post(
        "/api/v1/clients", json={"name": "Kumasi Foods"}, headers=bearer(manager_token)
    )

    assert first.status_code == 201
    assert first.json()["client_code"] == f"C{yy:02d}001"
    assert second.json()["client_code"] == f"C{yy:02d}002"


async def test_employee_can_view_but_not_create_clients(client, manager_token, employee_token):
    created = await client.post(
        "/api/v1/clients", json={"name": "Accra Motors"}, headers=bearer(manager_token)
    )
    client_id = created.json()["id"]

    listing = await client.get("/api/v1/clients", headers=bearer(employee_token))
    assert listing.status_code == 200
    assert [c["name"] for c in listing.json()] == ["Accra Motors"]

    detail = await client.get(f"/api/v1/clients/{client_id}", headers=bearer(employee_token))
    assert detail.status_code == 200
    assert re.fullmatch(r"C\d{5}", detail.json()["client_code"])

    denied = await client.post(
        "/api/v1/clients", json={"name": "Nope"}, headers=bearer(employee_token)
    )
    assert denied.status_code == 403


async def test_unknown_client(client, admin_token):
    res = await client.get("/api/v1/clients/missing", headers=bearer(admin_token))

    assert res.status_code == 404
    assert res.json()["error"] == "not_found"


async def test_create_client_validation(client, admin_token):
    res = await client.post(
        "/api/v1/clients",
        json={"name": "Bad Status", "status": "bankrupt"},
        headers=bearer(admin_token),
    )
    assert res.status_code == 422


async def test_employee_code_follows_hire_date(client, admin_token):
    res = await client.post(
        "/api/v1/employees",
        json={"name": "Abena Owusu", "hire_date": "2023-09-04", "department": "News"},
        headers=bearer(admin_token),
    )

    assert res.status_code == 201
    assert res.json()["employee_code"] == "S23001"

    listing = await client.get(
        "/api/v1/employees", params={"department": "News"}, headers=bearer(admin_token)
    )
    assert [e["employee_code"] for e in listing.json()] == ["S23001"]


async def test_employee_may_not_view_staff(client, employee_token):
    res = await client.get("/api/v1/employees", headers=bearer(employee_token))
    assert res.status_code == 403


async def test_parse_valid_id(client, employee_token):
    res = await client.get(
        "/api/v1/ids/parse", params={"value": "S23006"}, headers=bearer(employee_token)
    )

    assert res.status_code == 200
    assert res.json() == {
        "value": "S23006",
        "valid": True,
        "kind": "employee",
        "year": 2023,
        "sequence": 6,
    }


async def test_parse_malformed_id(client, employee_token):
    res = await client.get(
        "/api/v1/ids/parse", params={"value": "INVALID"}, headers=bearer(employee_token)
    )

    assert res.json() == {
        "value": "INVALID",
        "valid": False,
        "kind": None,
        "year": None,
        "sequence": None,
    }


async def test_manager_edits_client_without_touching_code(client, manager_token):
    created = await client.post(
        "/api/v1/clients", json={"name": "Accra Motors"}, headers=bearer(manager_token)
    )
    client_id = created.json()["id"]

    res = await client.patch(
        f"/api/v1/clients/{client_id}",
        json={"name": "Accra Motors Group", "status": "overdue"},
        headers=bearer(manager_token),
    )

    assert res.status_code == 200
    assert res.json()["name"] == "Accra Motors Group"
    assert res.json()["status"] == "overdue"
    assert res.json()["client_code"] == created.json()["client_code"]


async def test_client_code_is_not_editable(client, manager_token, employee_token):
    created = await client.post(
        "/api/v1/clients", json={"name": "Accra Motors"}, headers=bearer(manager_token)
    )
    client_id = created.json()["id"]

    rewrite = await client.patch(
        f"/api/v1/clients/{client_id}",
        json={"client_code": "C99999"},
        headers=bearer(manager_token),
    )
    null_name = await client.patch(
        f"/api/v1/clients/{client_id}", json={"name": None}, headers=bearer(manager_token)
    )
    denied = await client.patch(
        f"/api/v1/clients/{client_id}", json={"name": "Nope"}, headers=bearer(employee_token)
    )

    assert rewrite.status_code == 422
    assert null_name.status_code == 422
    assert denied.status_code == 403

    detail = await client.get(f"/api/v1/clients/{client_id}", headers=bearer(manager_token))
    assert detail.json()["client_code"] == created.json()["client_code"]


async def test_hire_date_correction_keeps_employee_code(client, admin_token):
    created = await client.post(
        "/api/v1/employees",
        json={"name": "Abena Owusu", "hire_date": "2023-12-30"},
        headers=bearer(admin_token),
    )

    res = await client.patch(
        f"/api/v1/employees/{created.json()['id']}",
        json={"hire_date": "2024-01-02", "department": "News"},
        headers=bearer(admin_token),
    )

    assert res.status_code == 200
    assert res.json()["employee_code"] == "S23001"
    assert res.json()["hire_date"] == "2024-01-02"

"""HTTP tests for leave requests."""

import pytest_asyncio


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


LEAVE = {
    "leave_type": "vacation",
    "start_date": "2024-08-05",
    "end_date": "2024-08-09",
    "reason": "Family visit",
}


@pytest_asyncio.fixture
async def staff_record(client, admin_token):
    """Staff record sharing the employee login's email."""
    res = await client.post(
        "/api/v1/employees",
        json={
            "name": "Esi Employee",
            "email": "employee@sweetfmonline.com",
            "hire_date": "2023-09-04",
        },
        headers=bearer(admin_token),
    )
    assert res.status_code == 201
    return res.json()


async def test_employee_files_leave_for_own_record(client, employee_token, staff_record):
    res = await client.post("/api/v1/leave-requests", json=LEAVE, headers=bearer(employee_token))

    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "pending"
    assert body["days"] == 5
    assert body["employee_code"] == staff_record["employee_code"] == "S23001"
    assert body["employee_name"] == "Esi Employee"


async def test_employee_without_staff_record(client, employee_token):
    res = await client.post("/api/v1/leave-requests", json=LEAVE, headers=bearer(employee_token))

    assert res.status_code == 404
    assert res.json()["message"] == "Employee record not found"


async def test_reversed_period_is_rejected(client, employee_token, staff_record):
    res = await client.post(
        "/api/v1/leave-requests",
        json={**LEAVE, "start_date": "2024-08-09", "end_date": "2024-08-05"},
        headers=bearer(employee_token),
    )
    assert res.status_code == 422


async def test_client_role_has_no_leave(client, make_user):
    _, token = await make_user("client", email="ads@accramotors.com")

    res = await client.get("/api/v1/leave-requests", headers=bearer(token))

    assert res.status_code == 403


async def test_manager_approves_once(client, manager_token, employee_token, staff_record):
    filed = await client.post("/api/v1/leave-requests", json=LEAVE, headers=bearer(employee_token))
    request_id = filed.json()["id"]

    denied = await client.post(
        f"/api/v1/leave-requests/{request_id}/approve", headers=bearer(employee_token)
    )
    assert denied.status_code == 403

    approved = await client.post(
        f"/api/v1/leave-requests/{request_id}/approve", headers=bearer(manager_token)
    )
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"
    assert approved.json()["review_notes"] == "Approved"

    again = await client.post(
        f"/api/v1/leave-requests/{request_id}/reject",
        json={"reason": "Changed my mind"},
        headers=bearer(manager_token),
    )
    assert again.status_code == 409
    assert again.json()["error"] == "invalid_leave_transition"


async def test_manager_rejects_with_reason(client, manager_token, employee_token, staff_record):
    filed = await client.post("/api/v1/leave-requests", json=LEAVE, headers=bearer(employee_token))
    request_id = filed.json()["id"]

    missing_reason = await client.post(
        f"/api/v1/leave-requests/{request_id}/reject", json={}, headers=bearer(manager_token)
    )
    assert missing_reason.status_code == 422

    rejected = await client.post(
        f"/api/v1/leave-requests/{request_id}/reject",
        json={"reason": "Peak ratings week"},
        headers=bearer(manager_token),
    )
    assert rejected.json()["status"] == "rejected"
    assert rejected.json()["review_notes"] == "Peak ratings week"


async def test_employee_cancels_own_request(client, employee_token, staff_record):
    filed = await client.post("/api/v1/leave-requests", json=LEAVE, headers=bearer(employee_token))

    res = await client.post(
        f"/api/v1/leave-requests/{filed.json()['id']}/cancel", headers=bearer(employee_token)
    )

    assert res.status_code == 200
    assert res.json()["status"] == "cancelled"


async def test_listing_scope(client, make_user, manager_token, employee_token, staff_record):
    await client.post("/api/v1/leave-requests", json=LEAVE, headers=bearer(employee_token))
    _, colleague_token = await make_user("employee", email="kwame@sweetfmonline.com")

    own = await client.get("/api/v1/leave-requests", headers=bearer(employee_token))
    colleague = await client.get("/api/v1/leave-requests", headers=bearer(colleague_token))
    everything = await client.get(
        "/api/v1/leave-requests", params={"status": "pending"}, headers=bearer(manager_token)
    )

    assert len(own.json()) == 1
    assert colleague.json() == []
    assert [r["employee_name"] for r in everything.json()] == ["Esi Employee"]

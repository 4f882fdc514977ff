"""HTTP tests for the invitation endpoints."""

from datetime import datetime, timedelta, timezone

from httpx import AsyncClient

from stationops.domain.services.invitation_service import InvitationService

BASE = "/api/v1/invitations"
PASSWORD = "Welcome2024"


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def invite(client: AsyncClient, token: str, email: str, role: str = "employee", **extra):
    return await client.post(
        BASE, json={"email": email, "role": role, **extra}, headers=bearer(token)
    )


def token_from(invite_url: str) -> str:
    return invite_url.rsplit("/", 1)[-1]


class TestCreate:
    async def test_admin_invites_employee(self, client, admin_token, mail_provider):
        res = await invite(
            client, admin_token, "kwame@sweetfmonline.com", department="Production"
        )

        assert res.status_code == 201
        data = res.json()
        assert data["email_sent"] is True
        assert "/invite/" in data["invite_url"]
        assert data["invitation"]["email"] == "kwame@sweetfmonline.com"
        assert data["invitation"]["role"] == "employee"
        assert data["invitation"]["department"] == "Production"
        assert data["invitation"]["status"] == "pending"
        assert "token" not in data["invitation"]
        mail_provider.send_email.assert_awaited_once()

    async def test_manager_may_not_invite_admin(self, client, manager_token):
        res = await invite(client, manager_token, "boss@sweetfmonline.com", role="admin")

        assert res.status_code == 403
        assert res.json()["error"] == "permission_denied"

    async def test_manager_invites_client(self, client, manager_token):
        res = await invite(client, manager_token, "buyer@accramotors.com", role="client")

        assert res.status_code == 201
        assert res.json()["invitation"]["department"] is None

    async def test_employee_may_not_invite(self, client, employee_token):
        res = await invite(client, employee_token, "kwame@sweetfmonline.com")
        assert res.status_code == 403

    async def test_requires_authentication(self, client):
        res = await client.post(BASE, json={"email": "kwame@sweetfmonline.com"})
        assert res.status_code == 401

    async def test_invalid_email(self, client, admin_token):
        res = await invite(client, admin_token, "not-an-email")
        assert res.status_code == 422

    async def test_duplicate(self, client, admin_token):
        await invite(client, admin_token, "kwame@sweetfmonline.com")

        res = await invite(client, admin_token, "Kwame@sweetfmonline.com")

        assert res.status_code == 409
        assert res.json()["error"] == "duplicate_invitation"
        assert res.json()["message"] == "An invitation has already been sent to this email"

    async def test_registered_email_conflict(self, client, admin_token, manager_token):
        res = await invite(client, admin_token, "manager@sweetfmonline.com", role="manager")

        assert res.status_code == 409
        assert res.json()["error"] == "email_already_registered"

    async def test_delivery_failure_still_creates(self, client, admin_token, mail_provider):
        mail_provider.send_email.side_effect = RuntimeError("provider down")

        res = await invite(client, admin_token, "kwame@sweetfmonline.com")

        assert res.status_code == 201
        assert res.json()["email_sent"] is False
        assert res.json()["invitation"]["email_sent"] is False


class TestListResendDelete:
    async def test_list_with_status_filter(self, client, admin_token):
        await invite(client, admin_token, "one@sweetfmonline.com")
        await invite(client, admin_token, "two@sweetfmonline.com")

        res = await client.get(BASE, headers=bearer(admin_token))
        assert res.status_code == 200
        assert res.json()["total"] == 2

        res = await client.get(BASE, params={"status": "accepted"}, headers=bearer(admin_token))
        assert res.json()["total"] == 0
        assert res.json()["invitations"] == []

    async def test_employee_may_not_list(self, client, employee_token):
        res = await client.get(BASE, headers=bearer(employee_token))
        assert res.status_code == 403

    async def test_resend_replaces_link(self, client, admin_token):
        created = (await invite(client, admin_token, "kwame@sweetfmonline.com")).json()
        old_token = token_from(created["invite_url"])

        res = await client.post(
            f"{BASE}/{created['invitation']['id']}/resend", headers=bearer(admin_token)
        )

        assert res.status_code == 200
        new_token = token_from(res.json()["invite_url"])
        assert new_token != old_token

        old = await client.get(f"{BASE}/token/{old_token}")
        assert old.json()["status"] == "not_found"
        new = await client.get(f"{BASE}/token/{new_token}")
        assert new.json()["status"] == "valid"

    async def test_resend_unknown(self, client, admin_token):
        res = await client.post(f"{BASE}/missing/resend", headers=bearer(admin_token))
        assert res.status_code == 404
        assert res.json()["error"] == "invitation_not_found"

    async def test_manager_may_not_delete(self, client, manager_token):
        created = (await invite(client, manager_token, "kwame@sweetfmonline.com")).json()

        res = await client.delete(
            f"{BASE}/{created['invitation']['id']}", headers=bearer(manager_token)
        )

        assert res.status_code == 403

    async def test_admin_deletes(self, client, admin_token):
        created = (await invite(client, admin_token, "kwame@sweetfmonline.com")).json()
        token = token_from(created["invite_url"])

        res = await client.delete(f"{BASE}/{created['invitation']['id']}", headers=bearer(admin_token))

        assert res.status_code == 204
        lookup = await client.get(f"{BASE}/token/{token}")
        assert lookup.json()["status"] == "not_found"

    async def test_delete_unknown(self, client, admin_token):
        res = await client.delete(f"{BASE}/missing", headers=bearer(admin_token))
        assert res.status_code == 404


class TestRedemption:
    async def test_lookup_unknown_token_is_200(self, client):
        res = await client.get(f"{BASE}/token/{'a' * 64}")

        assert res.status_code == 200
        assert res.json() == {
            "status": "not_found",
            "email": None,
            "role": None,
            "department": None,
            "expires_at": None,
        }

    async def test_lookup_valid_token(self, client, admin_token):
        created = (await invite(client, admin_token, "kwame@sweetfmonline.com", role="manager")).json()

        res = await client.get(f"{BASE}/token/{token_from(created['invite_url'])}")

        assert res.json()["status"] == "valid"
        assert res.json()["email"] == "kwame@sweetfmonline.com"
        assert res.json()["role"] == "manager"

    async def test_accept_signs_user_in(self, client, admin_token):
        created = (await invite(client, admin_token, "kwame@sweetfmonline.com")).json()
        token = token_from(created["invite_url"])

        res = await client.post(
            f"{BASE}/token/{token}/accept",
            json={"display_name": "Kwame Mensah", "password": PASSWORD},
        )

        assert res.status_code == 201
        data = res.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] > 0
        assert data["user"]["email"] == "kwame@sweetfmonline.com"
        assert data["user"]["role"] == "employee"

        me = await client.get("/api/v1/auth/me", headers=bearer(data["access_token"]))
        assert me.status_code == 200
        assert me.json()["display_name"] == "Kwame Mensah"

        lookup = await client.get(f"{BASE}/token/{token}")
        assert lookup.json()["status"] == "already_used"

        again = await client.post(
            f"{BASE}/token/{token}/accept",
            json={"display_name": "Kwame Mensah", "password": PASSWORD},
        )
        assert again.status_code == 409
        assert again.json()["error"] == "invitation_already_used"

    async def test_accept_weak_password(self, client, admin_token):
        created = (await invite(client, admin_token, "kwame@sweetfmonline.com")).json()

        res = await client.post(
            f"{BASE}/token/{token_from(created['invite_url'])}/accept",
            json={"display_name": "Kwame", "password": "short"},
        )

        assert res.status_code == 400
        assert res.json()["error"] == "weak_password"
        codes = [detail["code"] for detail in res.json()["details"]]
        assert "password_too_short" in codes

    async def test_accept_blank_name(self, client, admin_token):
        created = (await invite(client, admin_token, "kwame@sweetfmonline.com")).json()

        res = await client.post(
            f"{BASE}/token/{token_from(created['invite_url'])}/accept",
            json={"display_name": "  ", "password": PASSWORD},
        )

        assert res.status_code == 400
        assert res.json()["error"] == "invalid_display_name"

    async def test_accept_unknown_token(self, client):
        res = await client.post(
            f"{BASE}/token/{'b' * 64}/accept",
            json={"display_name": "Kwame", "password": PASSWORD},
        )

        assert res.status_code == 404
        assert res.json()["error"] == "invalid_token"

    async def test_accept_expired(self, client, db_session):
        past = datetime.now(timezone.utc) - timedelta(days=10)
        created = await InvitationService(db_session, clock=lambda: past).create_invitation(
            email="late@sweetfmonline.com", role="employee", invited_by="someone"
        )

        lookup = await client.get(f"{BASE}/token/{created.invitation.token}")
        assert lookup.json()["status"] == "expired"

        res = await client.post(
            f"{BASE}/token/{created.invitation.token}/accept",
            json={"display_name": "Late", "password": PASSWORD},
        )
        assert res.status_code == 410
        assert res.json()["error"] == "invitation_expired"

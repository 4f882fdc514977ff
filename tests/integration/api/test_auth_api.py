"""HTTP tests for login, the caller's profile, the user listing and health."""

from sqlalchemy import select

from stationops.infrastructure.persistence.models import UserModel


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def test_login_flow(client, make_user, db_session):
    """Login returns a usable token and records the login time."""
    await make_user(
        "manager",
        email="kofi@sweetfmonline.com",
        display_name="Kofi",
        password="Welcome2024",
        department="Sales",
    )

    res = await client.post(
        "/api/v1/auth/login",
        json={"email": "Kofi@sweetfmonline.com", "password": "Welcome2024"},
    )

    assert res.status_code == 200
    data = res.json()
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == "kofi@sweetfmonline.com"
    assert data["user"]["role"] == "manager"
    assert data["user"]["department"] == "Sales"

    me = await client.get("/api/v1/auth/me", headers=bearer(data["access_token"]))
    assert me.status_code == 200
    assert me.json()["display_name"] == "Kofi"

    user = (
        await db_session.execute(
            select(UserModel).where(UserModel.email == "kofi@sweetfmonline.com")
        )
    ).scalar_one()
    assert user.last_login is not None


async def test_login_wrong_password(client, make_user):
    await make_user("employee", email="esi@sweetfmonline.com", password="Welcome2024")

    res = await client.post(
        "/api/v1/auth/login",
        json={"email": "esi@sweetfmonline.com", "password": "Welcome2025"},
    )

    assert res.status_code == 401
    assert res.json()["error"] == "invalid_credentials"
    assert res.json()["message"] == "Invalid email or password"


async def test_login_unknown_email(client):
    res = await client.post(
        "/api/v1/auth/login",
        json={"email": "nobody@sweetfmonline.com", "password": "Welcome2024"},
    )

    assert res.status_code == 401
    assert res.json()["error"] == "invalid_credentials"


async def test_me_requires_token(client):
    res = await client.get("/api/v1/auth/me")

    assert res.status_code == 401
    assert res.headers["WWW-Authenticate"] == "Bearer"


async def test_me_rejects_malformed_header(client):
    res = await client.get("/api/v1/auth/me", headers={"Authorization": "Token abc"})
    assert res.status_code == 401


async def test_me_rejects_invalid_token(client):
    res = await client.get("/api/v1/auth/me", headers=bearer("not-a-jwt"))

    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid token"


async def test_list_users(client, admin_token, employee_token):
    res = await client.get("/api/v1/users", headers=bearer(admin_token))

    assert res.status_code == 200
    data = res.json()
    assert data["total"] == 2
    assert {user["email"] for user in data["users"]} == {
        "admin@sweetfmonline.com",
        "employee@sweetfmonline.com",
    }


async def test_employee_may_not_list_users(client, employee_token):
    res = await client.get("/api/v1/users", headers=bearer(employee_token))
    assert res.status_code == 403


async def test_health_check(client):
    res = await client.get("/health")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert "X-Correlation-ID" in res.headers


async def test_correlation_id_is_echoed(client):
    res = await client.get("/health", headers={"X-Correlation-ID": "cid_fixed"})
    assert res.headers["X-Correlation-ID"] == "cid_fixed"


async def test_login_upgrades_outdated_hash(client, make_user, db_session):
    """A hash made with weaker parameters is replaced on the next login."""
    from argon2 import PasswordHasher

    from stationops.infrastructure.auth import needs_rehash, verify_password

    user, _ = await make_user("employee", email="yaa@sweetfmonline.com")
    old_hash = PasswordHasher(time_cost=1, memory_cost=8192, parallelism=1).hash("Welcome2024")
    user.password_hash = old_hash
    await db_session.commit()
    assert needs_rehash(old_hash)

    res = await client.post(
        "/api/v1/auth/login",
        json={"email": "yaa@sweetfmonline.com", "password": "Welcome2024"},
    )

    assert res.status_code == 200
    stored = (
        await db_session.execute(
            select(UserModel.password_hash).where(UserModel.id == user.id)
        )
    ).scalar_one()
    assert stored != old_hash
    assert not needs_rehash(stored)
    assert verify_password("Welcome2024", stored)

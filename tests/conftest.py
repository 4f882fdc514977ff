"""Pytest configuration for all tests."""

import os
import uuid
import unittest.mock as mock
from datetime import datetime, timezone
from typing import AsyncGenerator, Awaitable, Callable

os.environ.setdefault("STATIONOPS_ENVIRONMENT", "testing")
os.environ.setdefault("STATIONOPS_EMAIL_PROVIDER", "console")
os.environ.setdefault("STATIONOPS_APP_BASE_URL", "https://ops.example.com")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import stationops.infrastructure.persistence.models  # noqa: F401
from stationops.infrastructure.auth import hash_password, jwt_service
from stationops.infrastructure.persistence.database import Base
from stationops.infrastructure.persistence.models import ProfileModel, UserModel
from stationops.infrastructure.services.email_service import EmailService

DEFAULT_PASSWORD = "Welcome2024"


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def mail_provider() -> mock.MagicMock:
    """Email provider double that accepts every message."""
    provider = mock.MagicMock()
    provider.send_email = mock.AsyncMock(return_value=True)
    return provider


@pytest.fixture
def email_service(mail_provider: mock.MagicMock) -> EmailService:
    return EmailService(mail_provider)


@pytest_asyncio.fixture
async def client(
    db_session: AsyncSession, email_service: EmailService
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database and email dependencies."""
    from stationops.infrastructure.api.app import app
    from stationops.infrastructure.persistence.database import get_db_session
    from stationops.infrastructure.services.email_service import get_email_service

    app.dependency_overrides[get_db_session] = lambda: db_session
    app.dependency_overrides[get_email_service] = lambda: email_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def make_user(
    db_session: AsyncSession,
) -> Callable[..., Awaitable[tuple[UserModel, str]]]:
    """Factory creating a user with a profile. Returns the user and an access token."""

    async def _make_user(
        role: str,
        email: str | None = None,
        display_name: str = "Test User",
        password: str = DEFAULT_PASSWORD,
        department: str | None = None,
    ) -> tuple[UserModel, str]:
        user_id = str(uuid.uuid4())
        email = email or f"{role}-{user_id[:8]}@sweetfmonline.com"
        user = UserModel(
            id=user_id,
            email=email,
            password_hash=hash_password(password),
            is_active=True,
            email_verified=True,
            created_at=datetime.now(timezone.utc),
        )
        db_session.add(user)
        db_session.add(
            ProfileModel(
                id=user_id,
                display_name=display_name,
                email=email,
                role=role,
                department=department,
            )
        )
        await db_session.commit()

        token = jwt_service.create_access_token(user_id=user_id, email=email, role=role)
        return user, token

    return _make_user


@pytest_asyncio.fixture
async def admin_token(make_user) -> str:
    """Create an admin user and return their access token."""
    _, token = await make_user("admin", email="admin@sweetfmonline.com", display_name="Ama Admin")
    return token


@pytest_asyncio.fixture
async def manager_token(make_user) -> str:
    """Create a manager user and return their access token."""
    _, token = await make_user(
        "manager",
        email="manager@sweetfmonline.com",
        display_name="Kofi Manager",
        department="Sales",
    )
    return token


@pytest_asyncio.fixture
async def employee_token(make_user) -> str:
    """Create an employee user and return their access token."""
    _, token = await make_user(
        "employee",
        email="employee@sweetfmonline.com",
        display_name="Esi Employee",
        department="Production",
    )
    return token

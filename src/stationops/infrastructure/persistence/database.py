"""Database abstraction layer using SQLAlchemy 2.0 async.

This module provides the session management and engine configuration for
SQLAlchemy with async support. It supports both SQLite (aiosqlite) and
PostgreSQL (asyncpg) drivers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from stationops.core.config import get_settings
from stationops.core.logging import get_logger

logger = get_logger(__name__)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


class DatabaseManager:
    """Owns the async engine and the session factory."""

    def __init__(self, database_url: str | None = None) -> None:
        self.settings = get_settings()
        self.database_url = database_url or self.settings.database_url
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine."""
        if self._engine is None:
            if self.is_sqlite:
                self._engine = create_async_engine(
                    self.database_url,
                    echo=self.settings.db_echo,
                    connect_args={"check_same_thread": False},
                )
            else:
                self._engine = create_async_engine(
                    self.database_url,
                    echo=self.settings.db_echo,
                    pool_size=self.settings.db_pool_size,
                    max_overflow=self.settings.db_max_overflow,
                    pool_timeout=self.settings.db_pool_timeout,
                    pool_recycle=self.settings.db_pool_recycle,
                )
            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    async def create_tables(self) -> None:
        """Create all tables. Production deployments use Alembic instead."""
        import stationops.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def drop_tables(self) -> None:
        """Drop all tables. Only use in testing."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.warning("Database tables dropped")

    async def disconnect(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that is rolled back if the block raises.

        Example:
            async with db.session() as session:
                result = await session.execute(select(UserModel))
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database connection check failed", error=str(e))
            return False


_db_manager: DatabaseManager | None = None


def get_db_manager() -> DatabaseManager:
    """Get the process-wide database manager."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a database session.

    Example:
        @router.get("/users")
        async def list_users(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_db_manager().session() as session:
        yield session


def _ensure_sqlite_directory(database_url: str) -> None:
    db_path = database_url.split(":///")[-1]
    if db_path in ("", ":memory:"):
        return
    db_dir = Path(db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)


async def init_database() -> None:
    """Prepare the database on application startup.

    Creates the SQLite directory if needed, checks connectivity, creates the
    tables outside production and provisions the bootstrap admin if one is
    configured.
    """
    db = get_db_manager()
    settings = get_settings()

    if db.is_sqlite:
        _ensure_sqlite_directory(db.database_url)

    if not await db.check_connection():
        raise RuntimeError("Failed to connect to database")

    if settings.is_production:
        logger.info("Production mode: skipping auto-create, use migrations")
    else:
        await db.create_tables()

    await create_bootstrap_admin(db)


async def create_bootstrap_admin(db: DatabaseManager) -> None:
    """Create the configured bootstrap admin if no account exists for it."""
    from stationops.domain.services.account_service import (
        AccountService,
        AccountServiceError,
    )

    settings = get_settings()
    if not settings.bootstrap_admin_email or not settings.bootstrap_admin_password:
        logger.debug("Bootstrap admin not configured, skipping")
        return

    async with db.session() as session:
        service = AccountService(session)
        try:
            created = await service.ensure_admin(
                email=settings.bootstrap_admin_email,
                password=settings.bootstrap_admin_password,
                display_name=settings.bootstrap_admin_name,
            )
        except AccountServiceError as e:
            logger.error(
                "Failed to create bootstrap admin",
                email=settings.bootstrap_admin_email,
                error=str(e),
            )
            return

    if created:
        logger.info("Bootstrap admin created", email=settings.bootstrap_admin_email)
    else:
        logger.info("Bootstrap admin already exists", email=settings.bootstrap_admin_email)


async def close_database() -> None:
    """Dispose of the engine on application shutdown."""
    await get_db_manager().disconnect()

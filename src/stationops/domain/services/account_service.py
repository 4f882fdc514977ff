"""Login and administrative account provisioning."""

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.exceptions import InvalidCredentialsError
from stationops.core.logging import get_logger
from stationops.domain.entities.role import UserRole
from stationops.domain.services.password_validator import default_password_validator
from stationops.infrastructure.auth import hash_password, needs_rehash, verify_password
from stationops.infrastructure.persistence.database import utcnow
from stationops.infrastructure.persistence.models import ProfileModel, UserModel
from stationops.infrastructure.persistence.repositories import (
    ProfileRepository,
    UserRepository,
)

logger = get_logger(__name__)


class AccountServiceError(Exception):
    """Raised when an account cannot be provisioned."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AccountService:
    """Authenticates users and provisions admin accounts."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.profiles = ProfileRepository(session)

    async def authenticate(
        self, email: str, password: str
    ) -> tuple[UserModel, ProfileModel | None]:
        """Check credentials and record the login.

        Raises:
            InvalidCredentialsError: For an unknown email, a wrong password or
                an inactive account. The three cases are indistinguishable.
        """
        email = (email or "").strip().lower()
        user = await self.users.get_by_email(email)
        if not verify_password(password, user.password_hash if user else None):
            logger.info("Login failed", email=email)
            raise InvalidCredentialsError()
        if not user.is_active:
            logger.info("Login rejected for inactive user", user_id=user.id)
            raise InvalidCredentialsError()

        if needs_rehash(user.password_hash):
            user.password_hash = hash_password(password)
            logger.info("Password hash upgraded", user_id=user.id)
        await self.users.update_last_login(user, utcnow())
        await self.session.commit()
        profile = await self.profiles.get_by_id(user.id)
        logger.info("Login succeeded", user_id=user.id)
        return user, profile

    async def ensure_admin(self, email: str, password: str, display_name: str) -> bool:
        """Create an admin account unless one already exists for the email.

        Returns:
            True if the account was created, False if it already existed.

        Raises:
            AccountServiceError: If the password is too weak or the insert fails.
        """
        email = (email or "").strip().lower()
        if await self.users.email_exists(email):
            return False

        errors = default_password_validator.validate(password)
        if errors:
            raise AccountServiceError(
                "Password validation failed: " + "; ".join(e.message for e in errors)
            )

        user = UserModel(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=hash_password(password),
            is_active=True,
            email_verified=True,
        )
        try:
            await self.users.create(user)
            await self.profiles.upsert(
                user_id=user.id,
                display_name=display_name,
                email=email,
                role=UserRole.ADMIN.value,
                department=None,
            )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise AccountServiceError(f"Failed to create admin: {e}") from e

        logger.info("Admin account created", user_id=user.id, email=email)
        return True

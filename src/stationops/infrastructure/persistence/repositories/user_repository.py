"""User and profile repositories."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.infrastructure.persistence.models import ProfileModel, UserModel


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, user: UserModel) -> UserModel:
        """Add a user and flush it.

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already taken.
        """
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_id(self, user_id: str) -> UserModel | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> UserModel | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        result = await self.session.execute(
            select(UserModel.id).where(UserModel.email == email).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def update_last_login(self, user: UserModel, at: datetime) -> None:
        user.last_login = at
        await self.session.flush()

    async def list_active_with_profiles(
        self,
    ) -> list[tuple[UserModel, ProfileModel | None]]:
        """Active users with their profiles, newest first."""
        result = await self.session.execute(
            select(UserModel, ProfileModel)
            .outerjoin(ProfileModel, ProfileModel.id == UserModel.id)
            .where(UserModel.is_active.is_(True))
            .order_by(UserModel.created_at.desc())
        )
        return [(user, profile) for user, profile in result.all()]


class ProfileRepository:
    """Repository for profile database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, user_id: str) -> ProfileModel | None:
        result = await self.session.execute(
            select(ProfileModel).where(ProfileModel.id == user_id)
        )
        return result.scalar_one_or_none()

    async def upsert(
        self,
        user_id: str,
        display_name: str,
        email: str,
        role: str,
        department: str | None,
    ) -> ProfileModel:
        """Create the profile for a user or overwrite the existing one."""
        profile = await self.get_by_id(user_id)
        if profile is None:
            profile = ProfileModel(id=user_id)
            self.session.add(profile)
        profile.display_name = display_name
        profile.email = email
        profile.role = role
        profile.department = department
        await self.session.flush()
        return profile

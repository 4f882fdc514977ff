"""Invitation lifecycle.

Admins and managers invite people by email. The invitee redeems the emailed
link exactly once, before it expires, to create their account. Resending
replaces the token and pushes the expiry out; deleting removes the row.
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.config import Settings, get_settings
from stationops.core.exceptions import (
    AccountCreationFailedError,
    DuplicateInvitationError,
    EmailAlreadyRegisteredError,
    InvalidDisplayNameError,
    InvalidInvitationError,
    InvalidTokenError,
    InvitationAlreadyUsedError,
    InvitationExpiredError,
    InvitationNotFoundError,
    ProfileSyncFailedError,
    WeakPasswordError,
)
from stationops.core.logging import get_logger
from stationops.domain.entities.invitation import (
    InvitationLookup,
    InvitationStatus,
    RedemptionStatus,
    classify_invitation,
)
from stationops.domain.entities.role import UserRole
from stationops.domain.services.password_validator import (
    PasswordValidator,
    default_password_validator,
)
from stationops.infrastructure.auth import JWTService, hash_password, jwt_service
from stationops.infrastructure.persistence.database import utcnow
from stationops.infrastructure.persistence.models import (
    InvitationModel,
    ProfileModel,
    UserModel,
)
from stationops.infrastructure.persistence.repositories import (
    InvitationRepository,
    ProfileRepository,
    UserRepository,
)
from stationops.infrastructure.services.email_service import EmailService
from stationops.infrastructure.services.token_service import token_service

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


@dataclass
class InvitationCreated:
    """Result of creating an invitation.

    ``email_sent`` is False when delivery failed; the invitation still exists
    and ``invite_url`` can be shared by hand.
    """

    invitation: InvitationModel
    invite_url: str
    email_sent: bool


@dataclass
class InvitationResent:
    invitation: InvitationModel
    invite_url: str


@dataclass
class AcceptedInvitation:
    """Account created by redeeming an invitation, plus its first session."""

    user: UserModel
    profile: ProfileModel
    access_token: str
    expires_in: int


@dataclass
class ActiveUser:
    id: str
    email: str
    display_name: str | None
    role: str | None
    department: str | None
    created_at: datetime
    last_login: datetime | None


class InvitationService:
    """Creates, resends, redeems and deletes invitations.

    Authorization is not checked here; callers enforce the access policy
    before invoking an operation.
    """

    def __init__(
        self,
        session: AsyncSession,
        email_service: EmailService | None = None,
        settings: Settings | None = None,
        password_validator: PasswordValidator = default_password_validator,
        tokens: JWTService = jwt_service,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.session = session
        self.email_service = email_service
        self.settings = settings or get_settings()
        self.password_validator = password_validator
        self.tokens = tokens
        self.clock = clock
        self.invitations = InvitationRepository(session)
        self.users = UserRepository(session)
        self.profiles = ProfileRepository(session)

    def invite_url(self, token: str) -> str:
        """Redemption link for a token."""
        return f"{self.settings.app_base_url}/invite/{token}"

    def _expiry_from(self, now: datetime) -> datetime:
        return now + timedelta(days=self.settings.invitation_expiry_days)

    async def create_invitation(
        self,
        email: str,
        role: UserRole | str,
        invited_by: str,
        department: str | None = None,
    ) -> InvitationCreated:
        """Create an invitation and try to email it.

        Args:
            email: Invitee address. Compared and stored lower-cased.
            role: Role granted on acceptance.
            invited_by: ID of the inviting user.
            department: Kept only for employee and manager invitations.

        Returns:
            The new invitation, its link and whether the email went out.

        Raises:
            InvalidInvitationError: If the email is blank.
            EmailAlreadyRegisteredError: If an account already uses the email.
            DuplicateInvitationError: If the email has an unaccepted invitation,
                whether or not it has expired.
        """
        email = normalize_email(email)
        if not email:
            raise InvalidInvitationError()
        role = UserRole(role)
        department = (department or "").strip() or None
        if not role.has_department:
            department = None

        if await self.users.email_exists(email):
            raise EmailAlreadyRegisteredError()
        if await self.invitations.get_unaccepted_by_email(email) is not None:
            raise DuplicateInvitationError()

        now = self.clock()
        token = token_service.generate_token()
        invitation = InvitationModel(
            id=str(uuid.uuid4()),
            email=email,
            role=role.value,
            department=department,
            token=token,
            invited_by=invited_by,
            expires_at=self._expiry_from(now),
            email_sent=False,
            created_at=now,
        )

        try:
            await self.invitations.create(invitation)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.info("Concurrent invitation for email rejected", email=email)
            raise DuplicateInvitationError() from e

        logger.info(
            "Invitation created",
            invitation_id=invitation.id,
            email=email,
            role=role.value,
            invited_by=invited_by,
        )

        invite_url = self.invite_url(token)
        email_sent = await self._deliver(invitation, invite_url)
        return InvitationCreated(
            invitation=invitation,
            invite_url=invite_url,
            email_sent=email_sent,
        )

    async def _deliver(self, invitation: InvitationModel, invite_url: str) -> bool:
        """Send the invitation email. Failures are logged, never raised."""
        if self.email_service is None:
            logger.warning("No email service configured", invitation_id=invitation.id)
            return False

        inviter = await self.profiles.get_by_id(invitation.invited_by)
        try:
            sent = await self.email_service.send_invitation_email(
                to=invitation.email,
                invite_url=invite_url,
                role=invitation.role,
                inviter_name=inviter.display_name if inviter else None,
            )
        except Exception as e:
            logger.warning(
                "Invitation email delivery failed",
                invitation_id=invitation.id,
                email=invitation.email,
                error=str(e),
            )
            return False

        if sent:
            await self.invitations.mark_email_sent(invitation, self.clock())
            await self.session.commit()
        return bool(sent)

    async def resend_invitation(self, invitation_id: str) -> InvitationResent:
        """Issue a fresh token and expiry for an unaccepted invitation.

        The previous token stops working immediately. No email is sent.

        Raises:
            InvitationNotFoundError: If the invitation does not exist.
            InvitationAlreadyUsedError: If it has already been accepted.
        """
        invitation = await self.invitations.get_by_id(invitation_id)
        if invitation is None:
            raise InvitationNotFoundError()
        if invitation.accepted_at is not None:
            raise InvitationAlreadyUsedError()

        token = token_service.generate_token()
        await self.invitations.replace_token(invitation, token, self._expiry_from(self.clock()))
        await self.session.commit()

        logger.info(
            "Invitation token reissued",
            invitation_id=invitation.id,
            token=token_service.preview(token),
        )
        return InvitationResent(invitation=invitation, invite_url=self.invite_url(token))

    async def fetch_invitation_by_token(self, token: str) -> InvitationLookup:
        """Look up an invitation and classify it for redemption."""
        invitation = await self.invitations.get_by_token(token) if token else None
        status = classify_invitation(invitation, self.clock())
        if status is not RedemptionStatus.VALID:
            logger.info(
                "Invitation not redeemable",
                status=status.value,
                token=token_service.preview(token or ""),
            )
        return InvitationLookup(status=status, invitation=invitation)

    async def accept_invitation(
        self,
        token: str,
        display_name: str,
        password: str,
    ) -> AcceptedInvitation:
        """Redeem an invitation and create the invitee's account.

        The account, its profile and the consumption of the invitation are
        written in one transaction: either all three persist or none do.

        Raises:
            InvalidTokenError: If the token is unknown.
            InvitationAlreadyUsedError: If the invitation was already redeemed,
                including by a concurrent request.
            InvitationExpiredError: If the invitation has expired.
            InvalidDisplayNameError: If the display name is blank.
            WeakPasswordError: If the password breaks the password policy.
            AccountCreationFailedError: If the account cannot be created.
            ProfileSyncFailedError: If the profile cannot be written. The
                invitation stays redeemable.
        """
        lookup = await self.fetch_invitation_by_token(token)
        if lookup.status is RedemptionStatus.NOT_FOUND:
            raise InvalidTokenError()
        if lookup.status is RedemptionStatus.ALREADY_USED:
            raise InvitationAlreadyUsedError()
        if lookup.status is RedemptionStatus.EXPIRED:
            raise InvitationExpiredError()

        display_name = (display_name or "").strip()
        if not display_name:
            raise InvalidDisplayNameError()

        errors = self.password_validator.validate(password)
        if errors:
            raise WeakPasswordError(details=[error.to_dict() for error in errors])

        invitation: InvitationModel = lookup.invitation
        invitation_id = invitation.id
        email = invitation.email
        role = invitation.role
        department = invitation.department

        if await self.users.email_exists(email):
            raise AccountCreationFailedError("A user with this email already exists")

        now = self.clock()
        user = UserModel(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=hash_password(password),
            is_active=True,
            email_verified=True,
            created_at=now,
            last_login=now,
        )
        try:
            await self.users.create(user)
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Account creation failed", invitation_id=invitation_id, error=str(e))
            raise AccountCreationFailedError("A user with this email already exists") from e

        try:
            profile = await self.profiles.upsert(
                user_id=user.id,
                display_name=display_name,
                email=email,
                role=role,
                department=department,
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                "Profile sync failed, invitation left redeemable",
                invitation_id=invitation_id,
                error=str(e),
            )
            raise ProfileSyncFailedError() from e

        if not await self.invitations.mark_accepted(invitation_id, now):
            await self.session.rollback()
            logger.info("Lost invitation redemption race", invitation_id=invitation_id)
            raise InvitationAlreadyUsedError()

        await self.session.commit()

        logger.info(
            "Invitation accepted",
            invitation_id=invitation_id,
            user_id=user.id,
            role=role,
        )
        access_token = self.tokens.create_access_token(
            user_id=user.id,
            email=email,
            role=role,
        )
        return AcceptedInvitation(
            user=user,
            profile=profile,
            access_token=access_token,
            expires_in=self.tokens.get_expires_in(),
        )

    async def delete_invitation(self, invitation_id: str) -> None:
        """Hard-delete an invitation in any state.

        Raises:
            InvitationNotFoundError: If the invitation does not exist.
        """
        if not await self.invitations.delete(invitation_id):
            raise InvitationNotFoundError()
        await self.session.commit()
        logger.info("Invitation deleted", invitation_id=invitation_id)

    async def list_invitations(
        self, status: InvitationStatus | None = None
    ) -> list[InvitationModel]:
        """Invitations newest first, optionally filtered by status."""
        return await self.invitations.list_invitations(status=status, now=self.clock())

    async def list_active_users(self) -> list[ActiveUser]:
        """Active accounts with their profile data, newest first."""
        rows = await self.users.list_active_with_profiles()
        return [
            ActiveUser(
                id=user.id,
                email=user.email,
                display_name=profile.display_name if profile else None,
                role=profile.role if profile else None,
                department=profile.department if profile else None,
                created_at=user.created_at,
                last_login=user.last_login,
            )
            for user, profile in rows
        ]

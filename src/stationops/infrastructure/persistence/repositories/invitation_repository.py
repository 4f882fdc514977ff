"""Invitation repository for database operations."""

from datetime import datetime

from sqlalchemy import and_, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.domain.entities.invitation import InvitationStatus
from stationops.infrastructure.persistence.database import utcnow
from stationops.infrastructure.persistence.models import InvitationModel


class InvitationRepository:
    """Repository for invitation database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, invitation: InvitationModel) -> InvitationModel:
        """Add an invitation and flush it.

        Raises:
            sqlalchemy.exc.IntegrityError: If the email already has an
                unconsumed invitation or the token collides.
        """
        self.session.add(invitation)
        await self.session.flush()
        return invitation

    async def get_by_token(self, token: str) -> InvitationModel | None:
        result = await self.session.execute(
            select(InvitationModel).where(InvitationModel.token == token)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, invitation_id: str) -> InvitationModel | None:
        result = await self.session.execute(
            select(InvitationModel).where(InvitationModel.id == invitation_id)
        )
        return result.scalar_one_or_none()

    async def get_unaccepted_by_email(self, email: str) -> InvitationModel | None:
        """Get the unconsumed invitation for an email, expired or not."""
        result = await self.session.execute(
            select(InvitationModel)
            .where(
                and_(
                    InvitationModel.email == email,
                    InvitationModel.accepted_at.is_(None),
                )
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_invitations(
        self,
        status: InvitationStatus | None = None,
        now: datetime | None = None,
    ) -> list[InvitationModel]:
        """List invitations, newest first.

        Args:
            status: Optional filter (pending, accepted, expired).
            now: Reference time for the expiry filters.

        Returns:
            List of invitation models.
        """
        query = select(InvitationModel)
        now = now or utcnow()

        if status == InvitationStatus.PENDING:
            query = query.where(
                and_(
                    InvitationModel.accepted_at.is_(None),
                    InvitationModel.expires_at > now,
                )
            )
        elif status == InvitationStatus.ACCEPTED:
            query = query.where(InvitationModel.accepted_at.is_not(None))
        elif status == InvitationStatus.EXPIRED:
            query = query.where(
                and_(
                    InvitationModel.accepted_at.is_(None),
                    InvitationModel.expires_at <= now,
                )
            )

        query = query.order_by(InvitationModel.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def mark_accepted(self, invitation_id: str, accepted_at: datetime) -> bool:
        """Consume an invitation if nobody else has.

        The update only matches while ``accepted_at`` is still NULL, so of
        two concurrent redemptions exactly one sees a row count of 1.

        Returns:
            True if this call consumed the invitation.
        """
        result = await self.session.execute(
            update(InvitationModel)
            .where(
                and_(
                    InvitationModel.id == invitation_id,
                    InvitationModel.accepted_at.is_(None),
                )
            )
            .values(accepted_at=accepted_at)
        )
        return result.rowcount == 1

    async def replace_token(
        self,
        invitation: InvitationModel,
        token: str,
        expires_at: datetime,
    ) -> InvitationModel:
        """Overwrite the token and expiry of an invitation."""
        invitation.token = token
        invitation.expires_at = expires_at
        await self.session.flush()
        return invitation

    async def mark_email_sent(self, invitation: InvitationModel, sent_at: datetime) -> None:
        invitation.email_sent = True
        invitation.email_sent_at = sent_at
        await self.session.flush()

    async def delete(self, invitation_id: str) -> bool:
        """Hard-delete an invitation.

        Returns:
            True if a row was deleted, False if not found.
        """
        result = await self.session.execute(
            delete(InvitationModel).where(InvitationModel.id == invitation_id)
        )
        await self.session.flush()
        return result.rowcount > 0

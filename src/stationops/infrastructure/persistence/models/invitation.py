"""SQLAlchemy model for the invitations table.

Invitations let admins and managers bring new users onto the platform.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from stationops.infrastructure.persistence.database import Base, utcnow


class InvitationModel(Base):
    """SQLAlchemy model for the invitations table.

    The invitee redeems the secret token to create their account. An
    invitation with ``accepted_at`` set is consumed for good.

    Attributes:
        id: Primary key (UUID string).
        email: Invited email address (lower-cased).
        role: Role the new user will receive.
        department: Department for employee and manager invitations.
        token: 64 hex character secret, unique across all invitations.
        invited_by: ID of the inviting user.
        expires_at: Redemption deadline.
        accepted_at: Set once, when the invitation is redeemed.
        email_sent: Whether the invitation email was delivered.
        email_sent_at: When the invitation email was delivered.
        created_at: Timestamp when the invitation was created.
    """

    __tablename__ = "invitations"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Invitation ID (UUID)",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Email address of the invited user",
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Role granted on acceptance",
    )
    department: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    token: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Secure random token for accepting invitation",
    )
    invited_by: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        comment="ID of the inviting user",
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    accepted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    email_sent: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    email_sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        # One unconsumed invitation per email
        Index(
            "uq_invitations_unaccepted_email",
            "email",
            unique=True,
            sqlite_where=text("accepted_at IS NULL"),
            postgresql_where=text("accepted_at IS NULL"),
        ),
    )

    def __repr__(self) -> str:
        return f"<Invitation(id={self.id}, email={self.email}, role={self.role})>"

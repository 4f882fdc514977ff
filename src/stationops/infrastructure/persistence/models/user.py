"""SQLAlchemy model for the users table.

A user row is the login identity: email plus Argon2 password hash. Display
data and role live on the matching profile row.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stationops.infrastructure.persistence.database import Base, utcnow


class UserModel(Base):
    """SQLAlchemy model for the users table.

    Attributes:
        id: Primary key (UUID string).
        email: Login email, lower-cased, unique.
        password_hash: Argon2id hash.
        is_active: Whether the user can log in.
        email_verified: Accounts created from invitations start verified.
        created_at: Timestamp when the user was created.
        last_login: Timestamp of last successful login.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="User ID (UUID)",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Login email address (lower-cased)",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Argon2id password hash",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Whether the user can log in",
    )
    email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Whether the email address is confirmed",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Timestamp of last successful login",
    )

    profile: Mapped["ProfileModel"] = relationship(  # noqa: F821
        "ProfileModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"

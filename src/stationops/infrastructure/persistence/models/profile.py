"""SQLAlchemy model for the profiles table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stationops.infrastructure.persistence.database import Base, utcnow


class ProfileModel(Base):
    """Display name, role and department of a user.

    The primary key is the user's id, so each user has at most one profile.
    """

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Same as users.id",
    )
    display_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="admin, manager, employee or client",
    )
    department: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    user: Mapped["UserModel"] = relationship(  # noqa: F821
        "UserModel",
        back_populates="profile",
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, role={self.role})>"

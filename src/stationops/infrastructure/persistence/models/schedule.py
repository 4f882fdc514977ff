"""SQLAlchemy models for shows and ad slots."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stationops.infrastructure.persistence.database import Base, utcnow


class ShowModel(Base):
    """A recurring radio programme.

    ``days_of_week`` holds weekday numbers with 0 = Sunday.
    """

    __tablename__ = "shows"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    presenter: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    days_of_week: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False, comment="HH:MM")
    end_time: Mapped[str] = mapped_column(String(5), nullable=False, comment="HH:MM")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        comment="active, inactive or archived",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        return f"<Show(id={self.id}, name={self.name})>"


class AdSlotModel(Base):
    """A scheduled advertisement for a client."""

    __tablename__ = "ad_slots"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    ad_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="spot",
        comment="spot, sponsorship, promo or psa",
    )
    days_of_week: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    time: Mapped[str] = mapped_column(String(5), nullable=False, comment="HH:MM")
    duration: Mapped[int] = mapped_column(Integer, nullable=False, comment="Seconds")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    frequency: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="scheduled",
        comment="scheduled, active, completed or cancelled",
    )
    cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        return f"<AdSlot(id={self.id}, title={self.title})>"

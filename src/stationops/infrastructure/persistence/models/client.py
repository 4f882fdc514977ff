"""SQLAlchemy model for the clients table."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stationops.infrastructure.persistence.database import Base, utcnow


class ClientModel(Base):
    """An advertiser.

    ``client_code`` is the human-readable ID (C24001). It is assigned once at
    creation and never regenerated.
    """

    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_code: Mapped[str] = mapped_column(
        String(6),
        nullable=False,
        unique=True,
        index=True,
        comment="Human-readable ID, C{YY}{NNN}",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        comment="active, overdue or inactive",
    )
    payment_terms: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contract_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="Also the reference date of client_code",
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, client_code={self.client_code})>"

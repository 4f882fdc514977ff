"""SQLAlchemy model for the leave_requests table."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stationops.infrastructure.persistence.database import Base, utcnow


class LeaveRequestModel(Base):
    """Time off requested for a staff member.

    ``requested_by`` is the user who filed the request; ``employee_id`` is
    the staff record the leave applies to. They differ when a manager files
    on someone's behalf.
    """

    __tablename__ = "leave_requests"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    employee_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    requested_by: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    leave_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="vacation, sick, personal, unpaid or emergency",
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    days: Mapped[int] = mapped_column(Integer, nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        index=True,
        comment="pending, approved, rejected or cancelled",
    )
    requested_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    reviewed_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    review_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<LeaveRequest(id={self.id}, status={self.status})>"

"""SQLAlchemy model for the employees table."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from stationops.infrastructure.persistence.database import Base, utcnow


class EmployeeModel(Base):
    """A staff member.

    ``employee_code`` is the human-readable ID (S23006), derived from the
    hire date rather than the creation time.
    """

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    employee_code: Mapped[str] = mapped_column(
        String(6),
        nullable=False,
        unique=True,
        index=True,
        comment="Human-readable ID, S{YY}{NNN}",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        comment="active, on_leave or terminated",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, employee_code={self.employee_code})>"

"""SQLAlchemy model for the id_sequences table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stationops.infrastructure.persistence.database import Base


class IdSequenceModel(Base):
    """Last allocated human-readable ID sequence per record kind and year."""

    __tablename__ = "id_sequences"

    kind: Mapped[str] = mapped_column(String(20), primary_key=True)
    year: Mapped[int] = mapped_column(Integer, primary_key=True)
    last_value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<IdSequence(kind={self.kind}, year={self.year}, last_value={self.last_value})>"

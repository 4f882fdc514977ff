"""Counter rows backing human-readable ID allocation."""

from sqlalchemy import and_, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.infrastructure.persistence.models import IdSequenceModel


class IdSequenceRepository:
    """Repository for per-(kind, year) counters."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def increment(self, kind: str, year: int) -> int | None:
        """Atomically bump a counter and return its new value.

        Returns:
            The incremented value, or None if no counter row exists yet.
        """
        result = await self.session.execute(
            update(IdSequenceModel)
            .where(
                and_(
                    IdSequenceModel.kind == kind,
                    IdSequenceModel.year == year,
                )
            )
            .values(last_value=IdSequenceModel.last_value + 1)
            .returning(IdSequenceModel.last_value)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none()

    async def seed(self, kind: str, year: int, last_value: int) -> bool:
        """Create a counter row inside a savepoint.

        Returns:
            True if this call created the row, False if another writer got
            there first.
        """
        try:
            async with self.session.begin_nested():
                self.session.add(
                    IdSequenceModel(kind=kind, year=year, last_value=last_value)
                )
        except IntegrityError:
            return False
        return True

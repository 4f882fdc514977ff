"""Race-free allocation of human-readable record IDs.

Counting existing rows and adding one hands out duplicates when two records
are created at once. Allocation instead increments a stored counter per
(kind, year) inside the caller's transaction, which the database serializes.
"""

from datetime import date, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.logging import get_logger
from stationops.domain.entities.record_kind import RecordKind
from stationops.domain.services.human_id_generator import HumanIdGenerator
from stationops.infrastructure.persistence.repositories import (
    ClientRepository,
    EmployeeRepository,
    IdSequenceRepository,
)

logger = get_logger(__name__)


class RecordIdService:
    """Hands out the next ID for a record kind within the current transaction.

    The caller commits. If the caller rolls back, the sequence value is
    released with it.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.sequences = IdSequenceRepository(session)

    async def _existing_count(self, kind: RecordKind, year: int) -> int:
        if kind is RecordKind.CLIENT:
            return await ClientRepository(self.session).count_created_in_year(year)
        return await EmployeeRepository(self.session).count_hired_in_year(year)

    async def allocate(self, kind: RecordKind, reference_date: date | datetime) -> str:
        """Allocate the next ID for the reference date's year.

        The first allocation of a year seeds the counter with the number of
        records of that kind already dated in the year, so IDs continue from
        data created before the counter existed.

        Raises:
            HumanIdExhaustedError: If the year's 999 IDs are used up.
        """
        kind = RecordKind(kind)
        year = reference_date.year

        value = await self.sequences.increment(kind.value, year)
        if value is None:
            existing = await self._existing_count(kind, year)
            if await self.sequences.seed(kind.value, year, existing):
                logger.info("ID sequence seeded", kind=kind.value, year=year, start=existing)
            value = await self.sequences.increment(kind.value, year)
            if value is None:
                raise RuntimeError(f"ID sequence for {kind.value}/{year} could not be created")

        human_id = HumanIdGenerator.format(kind, year, value)
        logger.debug("ID allocated", kind=kind.value, human_id=human_id)
        return human_id

"""Human-readable record ID generator.

Generates IDs in {P}{YY}{NNN} format: a one-letter kind prefix, the last two
digits of the reference year and a three-digit sequence within that year.
Clients use the ``C`` prefix (C24001), staff use ``S`` (S23006).
"""

import re
from collections.abc import Iterable
from datetime import date, datetime

from stationops.core.exceptions import StationOpsError
from stationops.domain.entities.record_kind import RecordKind


class HumanIdExhaustedError(StationOpsError):
    """Raised when a year has used up all 999 sequence numbers for a kind."""

    code = "id_sequence_exhausted"

    def __init__(self, kind: RecordKind, year: int) -> None:
        self.kind = kind
        self.year = year
        super().__init__(f"All 999 {kind.value} IDs for {year} have been allocated")


class HumanIdGenerator:
    """Generator for per-year sequential IDs.

    The sequence restarts at 001 every calendar year and is determined only
    by the number of records of the same kind already dated in that year.

    Example IDs: C24001, C24017, S23006
    """

    PREFIXES: dict[RecordKind, str] = {
        RecordKind.CLIENT: "C",
        RecordKind.EMPLOYEE: "S",
    }

    MAX_SEQUENCE = 999

    # Any kind: prefix letter, two year digits, three sequence digits
    PATTERN = re.compile(r"^(?P<prefix>[CS])(?P<year>\d{2})(?P<sequence>\d{3})$")

    @classmethod
    def prefix_for(cls, kind: RecordKind) -> str:
        return cls.PREFIXES[RecordKind(kind)]

    @classmethod
    def format(cls, kind: RecordKind, year: int, sequence: int) -> str:
        """Render an ID from its parts.

        Args:
            kind: Record kind, which selects the prefix letter.
            year: Full calendar year; only the last two digits are used.
            sequence: Position within the year, starting at 1.

        Returns:
            The formatted ID, e.g. ``C24001``.

        Raises:
            HumanIdExhaustedError: If sequence is above 999.
            ValueError: If sequence is below 1.
        """
        if sequence < 1:
            raise ValueError(f"Sequence must be positive, got {sequence}")
        if sequence > cls.MAX_SEQUENCE:
            raise HumanIdExhaustedError(RecordKind(kind), year)
        return f"{cls.prefix_for(kind)}{year % 100:02d}{sequence:03d}"

    @classmethod
    def generate(
        cls,
        kind: RecordKind,
        existing_reference_dates: Iterable[date | datetime],
        reference_date: date | datetime,
    ) -> str:
        """Compute the next ID by counting existing records in the same year.

        This is a pure function of its inputs. Two callers that read the same
        existing dates get the same answer, so concurrent allocation must go
        through ``RecordIdService`` instead.

        Args:
            kind: Record kind to generate for.
            existing_reference_dates: Reference dates of every existing record
                of this kind (creation time for clients, hire date for staff).
            reference_date: Reference date of the new record.

        Returns:
            The next ID for the reference year.

        Examples:
            >>> HumanIdGenerator.generate(RecordKind.CLIENT, [], date(2024, 3, 1))
            'C24001'
        """
        year = reference_date.year
        count = sum(1 for existing in existing_reference_dates if existing.year == year)
        return cls.format(kind, year, count + 1)

    @classmethod
    def validate(cls, kind: RecordKind, human_id: str) -> bool:
        """Check that an ID has the exact shape for the given kind.

        Examples:
            >>> HumanIdGenerator.validate(RecordKind.CLIENT, "C24001")
            True
            >>> HumanIdGenerator.validate(RecordKind.EMPLOYEE, "C24001")
            False
        """
        if not isinstance(human_id, str):
            return False
        match = cls.PATTERN.match(human_id)
        return bool(match) and match.group("prefix") == cls.prefix_for(kind)

    @classmethod
    def kind_of(cls, human_id: str) -> RecordKind | None:
        """Return the record kind an ID belongs to, or None when malformed."""
        match = cls._match(human_id)
        if match is None:
            return None
        prefix = match.group("prefix")
        for kind, candidate in cls.PREFIXES.items():
            if candidate == prefix:
                return kind
        return None

    @classmethod
    def year_of(cls, human_id: str) -> int | None:
        """Return the full year encoded in an ID (2000 + YY)."""
        match = cls._match(human_id)
        if match is None:
            return None
        return 2000 + int(match.group("year"))

    @classmethod
    def sequence_of(cls, human_id: str) -> int | None:
        """Return the in-year sequence number encoded in an ID."""
        match = cls._match(human_id)
        if match is None:
            return None
        return int(match.group("sequence"))

    @classmethod
    def _match(cls, human_id: str) -> re.Match[str] | None:
        if not isinstance(human_id, str):
            return None
        return cls.PATTERN.match(human_id)

"""Weekly broadcast grid.

Days are numbered 0..6 with 0 = Sunday. Times are ``HH:MM`` strings, which
sort correctly as text.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

SHOW_ACTIVE_STATUS = "active"
AD_SLOT_CANCELLED_STATUS = "cancelled"


@dataclass
class GridDay:
    """Programming for one weekday."""

    day: int
    name: str
    shows: list[Any] = field(default_factory=list)
    ad_slots: list[Any] = field(default_factory=list)


def _airs_on(item: Any, day: int) -> bool:
    return day in (item.days_of_week or [])


def build_week_grid(shows: Iterable[Any], ad_slots: Iterable[Any]) -> list[GridDay]:
    """Lay shows and ad slots out over the week.

    Args:
        shows: Objects with ``status``, ``days_of_week`` and ``start_time``.
        ad_slots: Objects with ``status``, ``days_of_week`` and ``time``.

    Returns:
        Seven GridDay entries, Sunday first. Each day holds the active shows
        airing that day ordered by start time and the non-cancelled ad slots
        airing that day ordered by slot time.
    """
    active_shows = [s for s in shows if s.status == SHOW_ACTIVE_STATUS]
    live_slots = [a for a in ad_slots if a.status != AD_SLOT_CANCELLED_STATUS]

    grid = []
    for day, name in enumerate(DAY_NAMES):
        grid.append(
            GridDay(
                day=day,
                name=name,
                shows=sorted(
                    (s for s in active_shows if _airs_on(s, day)),
                    key=lambda s: s.start_time,
                ),
                ad_slots=sorted(
                    (a for a in live_slots if _airs_on(a, day)),
                    key=lambda a: a.time,
                ),
            )
        )
    return grid

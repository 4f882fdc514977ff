"""Shows, ad slots and the weekly grid built from them."""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.exceptions import InvalidRecordError, RecordNotFoundError
from stationops.core.logging import get_logger
from stationops.domain.services.week_grid import GridDay, build_week_grid
from stationops.infrastructure.persistence.models import AdSlotModel, ShowModel
from stationops.infrastructure.persistence.repositories import (
    ClientRepository,
    ScheduleRepository,
)

logger = get_logger(__name__)

SHOW_FIELDS = frozenset(
    {
        "name",
        "description",
        "presenter",
        "category",
        "days_of_week",
        "start_time",
        "end_time",
        "start_date",
        "end_date",
        "status",
    }
)
AD_SLOT_FIELDS = frozenset(
    {
        "client_id",
        "title",
        "ad_type",
        "days_of_week",
        "time",
        "duration",
        "start_date",
        "end_date",
        "frequency",
        "status",
        "cost",
    }
)


def _check_fields(changes: dict, allowed: frozenset[str]) -> None:
    locked = sorted(set(changes) - allowed)
    if locked:
        raise InvalidRecordError(
            f"Cannot change {', '.join(locked)}",
            details=[{"field": field} for field in locked],
        )


class ScheduleService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.schedule = ScheduleRepository(session)
        self.clients = ClientRepository(session)

    async def create_show(
        self,
        name: str,
        days_of_week: list[int],
        start_time: str,
        end_time: str,
        start_date: date,
        end_date: date | None = None,
        presenter: str | None = None,
        category: str | None = None,
        description: str | None = None,
        status: str = "active",
    ) -> ShowModel:
        show = ShowModel(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            presenter=presenter,
            category=category,
            days_of_week=sorted(set(days_of_week)),
            start_time=start_time,
            end_time=end_time,
            start_date=start_date,
            end_date=end_date,
            status=status,
        )
        await self.schedule.add_show(show)
        await self.session.commit()
        logger.info("Show created", show_id=show.id, name=name)
        return show

    async def create_ad_slot(
        self,
        client_id: str,
        title: str,
        days_of_week: list[int],
        time: str,
        duration: int,
        start_date: date,
        end_date: date,
        ad_type: str = "spot",
        frequency: int = 1,
        status: str = "scheduled",
        cost: Decimal | None = None,
    ) -> AdSlotModel:
        """Schedule an advertisement. The client's name is copied onto the slot.

        Raises:
            RecordNotFoundError: If the client does not exist.
        """
        client = await self.clients.get_by_id(client_id)
        if client is None:
            raise RecordNotFoundError("Client not found")

        ad_slot = AdSlotModel(
            id=str(uuid.uuid4()),
            client_id=client.id,
            client_name=client.name,
            title=title,
            ad_type=ad_type,
            days_of_week=sorted(set(days_of_week)),
            time=time,
            duration=duration,
            start_date=start_date,
            end_date=end_date,
            frequency=frequency,
            status=status,
            cost=cost,
        )
        await self.schedule.add_ad_slot(ad_slot)
        await self.session.commit()
        logger.info("Ad slot created", ad_slot_id=ad_slot.id, client_id=client.id)
        return ad_slot

    async def get_show(self, show_id: str) -> ShowModel:
        show = await self.schedule.get_show(show_id)
        if show is None:
            raise RecordNotFoundError("Show not found")
        return show

    async def get_ad_slot(self, ad_slot_id: str) -> AdSlotModel:
        ad_slot = await self.schedule.get_ad_slot(ad_slot_id)
        if ad_slot is None:
            raise RecordNotFoundError("Ad slot not found")
        return ad_slot

    async def update_show(self, show_id: str, **changes) -> ShowModel:
        _check_fields(changes, SHOW_FIELDS)
        show = await self.get_show(show_id)
        if "days_of_week" in changes:
            changes["days_of_week"] = sorted(set(changes["days_of_week"]))
        for field, value in changes.items():
            setattr(show, field, value)
        await self.session.commit()
        logger.info("Show updated", show_id=show.id, fields=sorted(changes))
        return show

    async def update_ad_slot(self, ad_slot_id: str, **changes) -> AdSlotModel:
        """Apply changes to an ad slot.

        Moving the slot to another client copies that client's name too.

        Raises:
            RecordNotFoundError: If the slot or the new client does not exist.
            InvalidRecordError: If the resulting end date precedes the start date.
        """
        _check_fields(changes, AD_SLOT_FIELDS)
        ad_slot = await self.get_ad_slot(ad_slot_id)

        if "client_id" in changes:
            client = await self.clients.get_by_id(changes["client_id"])
            if client is None:
                raise RecordNotFoundError("Client not found")
            changes["client_name"] = client.name
        if "days_of_week" in changes:
            changes["days_of_week"] = sorted(set(changes["days_of_week"]))

        start_date = changes.get("start_date", ad_slot.start_date)
        end_date = changes.get("end_date", ad_slot.end_date)
        if end_date < start_date:
            raise InvalidRecordError(
                "end_date must not be before start_date",
                details=[{"field": "end_date"}],
            )

        for field, value in changes.items():
            setattr(ad_slot, field, value)
        await self.session.commit()
        logger.info("Ad slot updated", ad_slot_id=ad_slot.id, fields=sorted(changes))
        return ad_slot

    async def delete_show(self, show_id: str) -> None:
        await self.schedule.delete(await self.get_show(show_id))
        await self.session.commit()
        logger.info("Show deleted", show_id=show_id)

    async def delete_ad_slot(self, ad_slot_id: str) -> None:
        await self.schedule.delete(await self.get_ad_slot(ad_slot_id))
        await self.session.commit()
        logger.info("Ad slot deleted", ad_slot_id=ad_slot_id)

    async def list_shows(self) -> list[ShowModel]:
        return await self.schedule.list_shows()

    async def list_ad_slots(self) -> list[AdSlotModel]:
        return await self.schedule.list_ad_slots()

    async def week_grid(self) -> list[GridDay]:
        return build_week_grid(
            await self.schedule.list_shows(),
            await self.schedule.list_ad_slots(),
        )

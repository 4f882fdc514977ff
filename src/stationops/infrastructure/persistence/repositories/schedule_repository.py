"""Show and ad slot repository."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.infrastructure.persistence.models import AdSlotModel, ShowModel


class ScheduleRepository:
    """Repository for shows and ad slots."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_show(self, show: ShowModel) -> ShowModel:
        self.session.add(show)
        await self.session.flush()
        return show

    async def add_ad_slot(self, ad_slot: AdSlotModel) -> AdSlotModel:
        self.session.add(ad_slot)
        await self.session.flush()
        return ad_slot

    async def list_shows(self) -> list[ShowModel]:
        result = await self.session.execute(
            select(ShowModel).order_by(ShowModel.start_time)
        )
        return list(result.scalars().all())

    async def list_ad_slots(self) -> list[AdSlotModel]:
        result = await self.session.execute(
            select(AdSlotModel).order_by(AdSlotModel.time)
        )
        return list(result.scalars().all())

    async def get_show(self, show_id: str) -> ShowModel | None:
        result = await self.session.execute(select(ShowModel).where(ShowModel.id == show_id))
        return result.scalar_one_or_none()

    async def get_ad_slot(self, ad_slot_id: str) -> AdSlotModel | None:
        result = await self.session.execute(
            select(AdSlotModel).where(AdSlotModel.id == ad_slot_id)
        )
        return result.scalar_one_or_none()

    async def delete(self, item: ShowModel | AdSlotModel) -> None:
        await self.session.delete(item)
        await self.session.flush()

    async def rename_client(self, client_id: str, client_name: str) -> None:
        """Refresh the client name copied onto that client's ad slots."""
        await self.session.execute(
            update(AdSlotModel)
            .where(AdSlotModel.client_id == client_id)
            .values(client_name=client_name)
        )

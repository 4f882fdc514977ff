"""Broadcast schedule routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from stationops.domain.services.access_policy import Capability
from stationops.domain.services.schedule_service import ScheduleService
from stationops.infrastructure.api.dependencies import (
    CurrentUser,
    DbSession,
    require_capability,
)
from stationops.infrastructure.api.schemas import (
    AdSlotCreateRequest,
    AdSlotResponse,
    AdSlotUpdateRequest,
    GridDayResponse,
    ShowCreateRequest,
    ShowResponse,
    ShowUpdateRequest,
    WeekGridResponse,
)

router = APIRouter()

CanManage = Annotated[CurrentUser, Depends(require_capability(Capability.MANAGE_SCHEDULE))]
CanView = Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_SCHEDULE))]


@router.post("/shows", status_code=status.HTTP_201_CREATED, response_model=ShowResponse)
async def create_show(request: ShowCreateRequest, _: CanManage, session: DbSession) -> ShowResponse:
    show = await ScheduleService(session).create_show(**request.model_dump())
    return ShowResponse.model_validate(show)


@router.get("/shows", response_model=list[ShowResponse])
async def list_shows(_: CanView, session: DbSession) -> list[ShowResponse]:
    return [ShowResponse.model_validate(s) for s in await ScheduleService(session).list_shows()]


@router.patch("/shows/{show_id}", response_model=ShowResponse)
async def update_show(
    show_id: str, request: ShowUpdateRequest, _: CanManage, session: DbSession
) -> ShowResponse:
    show = await ScheduleService(session).update_show(show_id, **request.changes())
    return ShowResponse.model_validate(show)


@router.delete("/shows/{show_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_show(show_id: str, _: CanManage, session: DbSession) -> None:
    await ScheduleService(session).delete_show(show_id)


@router.post("/ad-slots", status_code=status.HTTP_201_CREATED, response_model=AdSlotResponse)
async def create_ad_slot(
    request: AdSlotCreateRequest, _: CanManage, session: DbSession
) -> AdSlotResponse:
    ad_slot = await ScheduleService(session).create_ad_slot(**request.model_dump())
    return AdSlotResponse.model_validate(ad_slot)


@router.get("/ad-slots", response_model=list[AdSlotResponse])
async def list_ad_slots(_: CanView, session: DbSession) -> list[AdSlotResponse]:
    return [
        AdSlotResponse.model_validate(a) for a in await ScheduleService(session).list_ad_slots()
    ]


@router.patch("/ad-slots/{ad_slot_id}", response_model=AdSlotResponse)
async def update_ad_slot(
    ad_slot_id: str, request: AdSlotUpdateRequest, _: CanManage, session: DbSession
) -> AdSlotResponse:
    ad_slot = await ScheduleService(session).update_ad_slot(ad_slot_id, **request.changes())
    return AdSlotResponse.model_validate(ad_slot)


@router.delete("/ad-slots/{ad_slot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ad_slot(ad_slot_id: str, _: CanManage, session: DbSession) -> None:
    await ScheduleService(session).delete_ad_slot(ad_slot_id)


@router.get("/week", response_model=WeekGridResponse)
async def week_grid(_: CanView, session: DbSession) -> WeekGridResponse:
    """Active shows and live ad slots for each weekday, Sunday first."""
    grid = await ScheduleService(session).week_grid()
    return WeekGridResponse(days=[GridDayResponse.model_validate(day) for day in grid])

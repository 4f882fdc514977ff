"""Integration tests for shows, ad slots and the weekly grid."""

from datetime import date
from decimal import Decimal

import pytest

from stationops.core.exceptions import RecordNotFoundError
from stationops.domain.services.client_service import ClientService
from stationops.domain.services.schedule_service import ScheduleService


@pytest.fixture
def service(db_session) -> ScheduleService:
    return ScheduleService(db_session)


async def test_ad_slot_copies_client_name(db_session, service):
    client = await ClientService(db_session).create_client(name="Accra Motors")

    ad_slot = await service.create_ad_slot(
        client_id=client.id,
        title="Weekend sale",
        days_of_week=[6, 5, 6],
        time="07:30",
        duration=30,
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 30),
        cost=Decimal("150.00"),
    )

    assert ad_slot.client_name == "Accra Motors"
    assert ad_slot.days_of_week == [5, 6]
    assert ad_slot.status == "scheduled"


async def test_ad_slot_for_unknown_client(service):
    with pytest.raises(RecordNotFoundError):
        await service.create_ad_slot(
            client_id="missing",
            title="Orphan",
            days_of_week=[1],
            time="08:00",
            duration=15,
            start_date=date(2024, 6, 1),
            end_date=date(2024, 6, 2),
        )


async def test_week_grid(db_session, service):
    client = await ClientService(db_session).create_client(name="Accra Motors")
    await service.create_show(
        name="Drive Time",
        days_of_week=[1, 2, 3, 4, 5],
        start_time="16:00",
        end_time="19:00",
        start_date=date(2024, 1, 1),
    )
    await service.create_show(
        name="Morning Show",
        days_of_week=[1, 2, 3, 4, 5],
        start_time="06:00",
        end_time="09:00",
        start_date=date(2024, 1, 1),
    )
    await service.create_show(
        name="Old Show",
        days_of_week=[1],
        start_time="12:00",
        end_time="13:00",
        start_date=date(2020, 1, 1),
        status="archived",
    )
    await service.create_ad_slot(
        client_id=client.id,
        title="Monday spot",
        days_of_week=[1],
        time="06:30",
        duration=30,
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 30),
    )
    await service.create_ad_slot(
        client_id=client.id,
        title="Pulled spot",
        days_of_week=[1],
        time="06:45",
        duration=30,
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 30),
        status="cancelled",
    )

    grid = await service.week_grid()

    assert len(grid) == 7
    monday = grid[1]
    assert monday.name == "Monday"
    assert [show.name for show in monday.shows] == ["Morning Show", "Drive Time"]
    assert [slot.title for slot in monday.ad_slots] == ["Monday spot"]
    assert grid[0].shows == []
    assert len(await service.list_shows()) == 3
    assert len(await service.list_ad_slots()) == 2

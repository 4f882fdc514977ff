"""Integration tests for editing clients, employees, shows and ad slots."""

from datetime import date, datetime, timezone

import pytest
from sqlalchemy import select

from stationops.core.exceptions import InvalidRecordError, RecordNotFoundError
from stationops.domain.services.client_service import ClientService
from stationops.domain.services.employee_service import EmployeeService
from stationops.domain.services.schedule_service import ScheduleService
from stationops.infrastructure.persistence.models import AdSlotModel, ClientModel


def clock_2024():
    return datetime(2024, 4, 2, 9, 30, tzinfo=timezone.utc)


class TestUpdateClient:
    async def test_edits_fields_and_keeps_code(self, db_session):
        service = ClientService(db_session, clock=clock_2024)
        client = await service.create_client(name="Accra Motors")

        updated = await service.update_client(
            client.id, company="Accra Motors Ltd", status="overdue", phone="0302 000 000"
        )

        assert updated.client_code == "C24001"
        assert updated.company == "Accra Motors Ltd"
        assert updated.status == "overdue"

    async def test_code_cannot_be_rewritten(self, db_session):
        service = ClientService(db_session, clock=clock_2024)
        client = await service.create_client(name="Accra Motors")

        with pytest.raises(InvalidRecordError) as exc_info:
            await service.update_client(client.id, client_code="C99999")

        assert exc_info.value.details == [{"field": "client_code"}]
        stored = (
            await db_session.execute(
                select(ClientModel.client_code).where(ClientModel.id == client.id)
            )
        ).scalar_one()
        assert stored == "C24001"

    async def test_rename_reaches_ad_slots(self, db_session):
        clients = ClientService(db_session, clock=clock_2024)
        client = await clients.create_client(name="Accra Motors")
        await ScheduleService(db_session).create_ad_slot(
            client_id=client.id,
            title="Easter sale",
            days_of_week=[1],
            time="07:30",
            duration=30,
            start_date=date(2024, 4, 1),
            end_date=date(2024, 4, 30),
        )

        await clients.update_client(client.id, name="Accra Motors Group")

        names = (await db_session.execute(select(AdSlotModel.client_name))).scalars().all()
        assert names == ["Accra Motors Group"]

    async def test_missing_client(self, db_session):
        with pytest.raises(RecordNotFoundError):
            await ClientService(db_session).update_client("missing", name="Nobody")


class TestUpdateEmployee:
    async def test_hire_date_correction_keeps_code(self, db_session):
        service = EmployeeService(db_session)
        employee = await service.create_employee(name="Abena", hire_date=date(2023, 12, 30))

        updated = await service.update_employee(
            employee.id, hire_date=date(2024, 1, 2), position="Producer"
        )

        assert updated.employee_code == "S23001"
        assert updated.hire_date == date(2024, 1, 2)
        assert updated.position == "Producer"

    async def test_code_cannot_be_rewritten(self, db_session):
        service = EmployeeService(db_session)
        employee = await service.create_employee(name="Abena", hire_date=date(2023, 9, 4))

        with pytest.raises(InvalidRecordError):
            await service.update_employee(employee.id, employee_code="S23999", name="Abena O.")

        assert (await service.get_employee(employee.id)).name == "Abena"


class TestUpdateSchedule:
    async def _client(self, db_session, name="Accra Motors"):
        return await ClientService(db_session, clock=clock_2024).create_client(name=name)

    async def test_update_show_normalizes_days(self, db_session):
        service = ScheduleService(db_session)
        show = await service.create_show(
            name="Drive Time",
            days_of_week=[1, 2],
            start_time="16:00",
            end_time="19:00",
            start_date=date(2024, 1, 1),
        )

        updated = await service.update_show(show.id, days_of_week=[5, 3, 3], presenter="Akosua")

        assert updated.days_of_week == [3, 5]
        assert updated.presenter == "Akosua"

    async def test_moving_ad_slot_copies_new_client_name(self, db_session):
        first = await self._client(db_session)
        second = await self._client(db_session, name="Kumasi Foods")
        service = ScheduleService(db_session)
        slot = await service.create_ad_slot(
            client_id=first.id,
            title="Jingle",
            days_of_week=[2],
            time="08:00",
            duration=15,
            start_date=date(2024, 5, 1),
            end_date=date(2024, 5, 31),
        )

        updated = await service.update_ad_slot(slot.id, client_id=second.id)

        assert updated.client_id == second.id
        assert updated.client_name == "Kumasi Foods"

    async def test_ad_slot_range_checked_against_stored_dates(self, db_session):
        client = await self._client(db_session)
        service = ScheduleService(db_session)
        slot = await service.create_ad_slot(
            client_id=client.id,
            title="Jingle",
            days_of_week=[2],
            time="08:00",
            duration=15,
            start_date=date(2024, 5, 10),
            end_date=date(2024, 5, 31),
        )

        with pytest.raises(InvalidRecordError):
            await service.update_ad_slot(slot.id, end_date=date(2024, 5, 1))

    async def test_delete_show_removes_it_from_the_grid(self, db_session):
        service = ScheduleService(db_session)
        show = await service.create_show(
            name="Late Night",
            days_of_week=[0],
            start_time="22:00",
            end_time="23:59",
            start_date=date(2024, 1, 1),
        )

        await service.delete_show(show.id)

        assert await service.list_shows() == []
        with pytest.raises(RecordNotFoundError):
            await service.delete_show(show.id)

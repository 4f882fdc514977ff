"""Client and employee repositories."""

from datetime import date, datetime, timezone

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.infrastructure.persistence.models import ClientModel, EmployeeModel


class ClientRepository:
    """Repository for client database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, client: ClientModel) -> ClientModel:
        self.session.add(client)
        await self.session.flush()
        return client

    async def get_by_id(self, client_id: str) -> ClientModel | None:
        result = await self.session.execute(
            select(ClientModel).where(ClientModel.id == client_id)
        )
        return result.scalar_one_or_none()

    async def list_clients(self, status: str | None = None) -> list[ClientModel]:
        query = select(ClientModel)
        if status:
            query = query.where(ClientModel.status == status)
        query = query.order_by(ClientModel.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_created_in_year(self, year: int) -> int:
        """Number of clients whose creation time falls in the given year."""
        start = datetime(year, 1, 1, tzinfo=timezone.utc)
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
        result = await self.session.execute(
            select(func.count(ClientModel.id)).where(
                and_(ClientModel.created_at >= start, ClientModel.created_at < end)
            )
        )
        return result.scalar_one()


class EmployeeRepository:
    """Repository for employee database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, employee: EmployeeModel) -> EmployeeModel:
        self.session.add(employee)
        await self.session.flush()
        return employee

    async def get_by_id(self, employee_id: str) -> EmployeeModel | None:
        result = await self.session.execute(
            select(EmployeeModel).where(EmployeeModel.id == employee_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> EmployeeModel | None:
        """Staff record whose email matches, ignoring case."""
        result = await self.session.execute(
            select(EmployeeModel).where(func.lower(EmployeeModel.email) == email.lower())
        )
        return result.scalars().first()

    async def list_employees(self, department: str | None = None) -> list[EmployeeModel]:
        query = select(EmployeeModel)
        if department:
            query = query.where(EmployeeModel.department == department)
        query = query.order_by(EmployeeModel.employee_code)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_hired_in_year(self, year: int) -> int:
        """Number of employees whose hire date falls in the given year."""
        result = await self.session.execute(
            select(func.count(EmployeeModel.id)).where(
                and_(
                    EmployeeModel.hire_date >= date(year, 1, 1),
                    EmployeeModel.hire_date < date(year + 1, 1, 1),
                )
            )
        )
        return result.scalar_one()

"""Staff records."""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.exceptions import InvalidRecordError, RecordNotFoundError
from stationops.core.logging import get_logger
from stationops.domain.entities.record_kind import RecordKind
from stationops.domain.services.record_id_service import RecordIdService
from stationops.infrastructure.persistence.models import EmployeeModel
from stationops.infrastructure.persistence.repositories import EmployeeRepository

logger = get_logger(__name__)

# employee_code is assigned once, at creation, and keeps its year even if
# hire_date is corrected later.
UPDATABLE_FIELDS = frozenset(
    {"name", "email", "phone", "position", "department", "hire_date", "salary", "status"}
)


class EmployeeService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.employees = EmployeeRepository(session)
        self.record_ids = RecordIdService(session)

    async def create_employee(
        self,
        name: str,
        hire_date: date,
        email: str | None = None,
        phone: str | None = None,
        position: str | None = None,
        department: str | None = None,
        salary: Decimal | None = None,
        status: str = "active",
    ) -> EmployeeModel:
        """Create an employee and label it with the next staff code.

        The hire date, not the creation time, picks the year of the code.
        """
        try:
            employee_code = await self.record_ids.allocate(RecordKind.EMPLOYEE, hire_date)
            employee = EmployeeModel(
                id=str(uuid.uuid4()),
                employee_code=employee_code,
                name=name,
                email=email,
                phone=phone,
                position=position,
                department=department,
                hire_date=hire_date,
                salary=salary,
                status=status,
            )
            await self.employees.create(employee)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Employee created", employee_id=employee.id, employee_code=employee_code)
        return employee

    async def get_employee(self, employee_id: str) -> EmployeeModel:
        employee = await self.employees.get_by_id(employee_id)
        if employee is None:
            raise RecordNotFoundError("Employee not found")
        return employee

    async def list_employees(self, department: str | None = None) -> list[EmployeeModel]:
        return await self.employees.list_employees(department=department)

    async def update_employee(self, employee_id: str, **changes) -> EmployeeModel:
        """Apply field changes to an employee. The staff code never changes.

        Raises:
            RecordNotFoundError: If the employee does not exist.
            InvalidRecordError: If a change targets a field that cannot be edited.
        """
        locked = sorted(set(changes) - UPDATABLE_FIELDS)
        if locked:
            raise InvalidRecordError(
                f"Cannot change {', '.join(locked)}",
                details=[{"field": field} for field in locked],
            )

        employee = await self.get_employee(employee_id)
        for field, value in changes.items():
            setattr(employee, field, value)
        await self.session.commit()

        logger.info("Employee updated", employee_id=employee.id, fields=sorted(changes))
        return employee

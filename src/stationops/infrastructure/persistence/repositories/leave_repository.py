"""Leave request repository."""

from typing import Any

from sqlalchemy import and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stationops.infrastructure.persistence.models import EmployeeModel, LeaveRequestModel


class LeaveRequestRepository:
    """Repository for leave request database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, request: LeaveRequestModel) -> LeaveRequestModel:
        self.session.add(request)
        await self.session.flush()
        return request

    async def get_by_id(self, request_id: str) -> LeaveRequestModel | None:
        result = await self.session.execute(
            select(LeaveRequestModel).where(LeaveRequestModel.id == request_id)
        )
        return result.scalar_one_or_none()

    async def list_requests(
        self,
        requested_by: str | None = None,
        status: str | None = None,
    ) -> list[tuple[LeaveRequestModel, EmployeeModel]]:
        """Requests with their employee record, newest first."""
        query = select(LeaveRequestModel, EmployeeModel).join(
            EmployeeModel, EmployeeModel.id == LeaveRequestModel.employee_id
        )
        if requested_by:
            query = query.where(LeaveRequestModel.requested_by == requested_by)
        if status:
            query = query.where(LeaveRequestModel.status == status)
        query = query.order_by(LeaveRequestModel.requested_at.desc())
        result = await self.session.execute(query)
        return [(request, employee) for request, employee in result.all()]

    async def transition(self, request_id: str, from_status: str, **values: Any) -> bool:
        """Move a request out of ``from_status`` if it is still there.

        Returns:
            True if this call changed the request. False means another
            writer moved it first.
        """
        result = await self.session.execute(
            update(LeaveRequestModel)
            .where(
                and_(
                    LeaveRequestModel.id == request_id,
                    LeaveRequestModel.status == from_status,
                )
            )
            .values(**values)
        )
        return result.rowcount == 1

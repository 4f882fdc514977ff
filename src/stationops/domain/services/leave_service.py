"""Leave requests and their review.

A request is filed for one staff record and stays pending until a manager
approves or rejects it, or the requester cancels it. Each transition is a
conditional update on the pending status, so two reviewers acting at once
cannot both succeed.
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.exceptions import (
    InvalidLeaveRequestError,
    LeaveTransitionError,
    PermissionDeniedError,
    RecordNotFoundError,
)
from stationops.core.logging import get_logger
from stationops.domain.entities.leave import LeaveStatus, LeaveType, leave_days
from stationops.infrastructure.persistence.database import utcnow
from stationops.infrastructure.persistence.models import EmployeeModel, LeaveRequestModel
from stationops.infrastructure.persistence.repositories import (
    EmployeeRepository,
    LeaveRequestRepository,
)

logger = get_logger(__name__)


@dataclass
class LeaveEntry:
    request: LeaveRequestModel
    employee: EmployeeModel


class LeaveService:
    """Files, reviews and cancels leave requests.

    Capability checks happen in the caller. The service only enforces
    ownership, and takes ``may_manage`` to know whether the caller may act
    on other people's requests.
    """

    def __init__(
        self,
        session: AsyncSession,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.session = session
        self.clock = clock
        self.requests = LeaveRequestRepository(session)
        self.employees = EmployeeRepository(session)

    async def _employee_for(
        self,
        requester_email: str,
        employee_id: str | None,
        may_manage: bool,
    ) -> EmployeeModel:
        if employee_id is None:
            employee = await self.employees.get_by_email(requester_email)
            if employee is None:
                raise RecordNotFoundError("Employee record not found")
            return employee

        employee = await self.employees.get_by_id(employee_id)
        if employee is None:
            raise RecordNotFoundError("Employee not found")
        if not may_manage and (employee.email or "").lower() != requester_email.lower():
            raise PermissionDeniedError("You can only request leave for yourself")
        return employee

    async def submit_request(
        self,
        requested_by: str,
        requester_email: str,
        leave_type: LeaveType | str,
        start_date: date,
        end_date: date,
        reason: str,
        employee_id: str | None = None,
        may_manage: bool = False,
    ) -> LeaveEntry:
        """File a pending leave request.

        Without ``employee_id`` the request is for the staff record that
        shares the requester's email. Only managers may name someone else.

        Raises:
            InvalidLeaveRequestError: If the period is reversed or the reason
                is blank.
            RecordNotFoundError: If no staff record matches.
            PermissionDeniedError: If a non-manager names another employee.
        """
        leave_type = LeaveType(leave_type)
        if end_date < start_date:
            raise InvalidLeaveRequestError("End date must not be before start date")
        reason = (reason or "").strip()
        if not reason:
            raise InvalidLeaveRequestError("Please give a reason for the leave")

        employee = await self._employee_for(requester_email, employee_id, may_manage)

        request = LeaveRequestModel(
            id=str(uuid.uuid4()),
            employee_id=employee.id,
            requested_by=requested_by,
            leave_type=leave_type.value,
            start_date=start_date,
            end_date=end_date,
            days=leave_days(start_date, end_date),
            reason=reason,
            status=LeaveStatus.PENDING.value,
            requested_at=self.clock(),
        )
        await self.requests.create(request)
        await self.session.commit()

        logger.info(
            "Leave requested",
            leave_request_id=request.id,
            employee_id=employee.id,
            leave_type=leave_type.value,
            days=request.days,
        )
        return LeaveEntry(request=request, employee=employee)

    async def _get(self, request_id: str) -> LeaveRequestModel:
        request = await self.requests.get_by_id(request_id)
        if request is None:
            raise RecordNotFoundError("Leave request not found")
        return request

    async def _transition(
        self,
        request: LeaveRequestModel,
        status: LeaveStatus,
        **values,
    ) -> LeaveEntry:
        if request.status != LeaveStatus.PENDING.value:
            raise LeaveTransitionError(f"Leave request is already {request.status}")

        changed = await self.requests.transition(
            request.id, LeaveStatus.PENDING.value, status=status.value, **values
        )
        if not changed:
            request_id = request.id
            await self.session.rollback()
            logger.info("Leave request changed concurrently", leave_request_id=request_id)
            raise LeaveTransitionError()
        await self.session.commit()
        await self.session.refresh(request)

        logger.info("Leave request updated", leave_request_id=request.id, status=status.value)
        employee = await self.employees.get_by_id(request.employee_id)
        return LeaveEntry(request=request, employee=employee)

    async def approve(
        self, request_id: str, reviewer_id: str, notes: str | None = None
    ) -> LeaveEntry:
        request = await self._get(request_id)
        return await self._transition(
            request,
            LeaveStatus.APPROVED,
            reviewed_by=reviewer_id,
            reviewed_at=self.clock(),
            review_notes=(notes or "").strip() or "Approved",
        )

    async def reject(self, request_id: str, reviewer_id: str, reason: str) -> LeaveEntry:
        """Reject a pending request. A reason is required and is shown to the requester."""
        reason = (reason or "").strip()
        if not reason:
            raise InvalidLeaveRequestError("Please give a reason for rejecting the request")
        request = await self._get(request_id)
        return await self._transition(
            request,
            LeaveStatus.REJECTED,
            reviewed_by=reviewer_id,
            reviewed_at=self.clock(),
            review_notes=reason,
        )

    async def cancel(self, request_id: str, user_id: str, may_manage: bool = False) -> LeaveEntry:
        request = await self._get(request_id)
        if request.requested_by != user_id and not may_manage:
            raise PermissionDeniedError("You can only cancel your own leave requests")
        return await self._transition(request, LeaveStatus.CANCELLED)

    async def list_requests(
        self,
        user_id: str,
        may_manage: bool = False,
        status: LeaveStatus | str | None = None,
    ) -> list[LeaveEntry]:
        """Every request for managers, the caller's own requests otherwise."""
        status = LeaveStatus(status).value if status else None
        rows = await self.requests.list_requests(
            requested_by=None if may_manage else user_id,
            status=status,
        )
        return [LeaveEntry(request=request, employee=employee) for request, employee in rows]

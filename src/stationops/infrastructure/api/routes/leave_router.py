"""Leave request routes.

Staff file requests for themselves; managers and admins see every request
and approve or reject pending ones.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from stationops.domain.entities.leave import LeaveStatus
from stationops.domain.services.access_policy import Capability, can
from stationops.domain.services.leave_service import LeaveService
from stationops.infrastructure.api.dependencies import (
    CurrentUser,
    DbSession,
    require_capability,
)
from stationops.infrastructure.api.schemas import (
    LeaveApproveRequest,
    LeaveRejectRequest,
    LeaveRequestCreate,
    LeaveRequestResponse,
)

router = APIRouter()

CanRequest = Annotated[CurrentUser, Depends(require_capability(Capability.REQUEST_LEAVE))]
CanReview = Annotated[CurrentUser, Depends(require_capability(Capability.MANAGE_LEAVE))]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LeaveRequestResponse)
async def submit_leave_request(
    request: LeaveRequestCreate,
    current_user: CanRequest,
    session: DbSession,
) -> LeaveRequestResponse:
    entry = await LeaveService(session).submit_request(
        requested_by=current_user.user_id,
        requester_email=current_user.email,
        leave_type=request.leave_type,
        start_date=request.start_date,
        end_date=request.end_date,
        reason=request.reason,
        employee_id=request.employee_id,
        may_manage=can(current_user.role, Capability.MANAGE_LEAVE),
    )
    return LeaveRequestResponse.from_entry(entry)


@router.get("", response_model=list[LeaveRequestResponse])
async def list_leave_requests(
    current_user: CanRequest,
    session: DbSession,
    status_filter: Annotated[LeaveStatus | None, Query(alias="status")] = None,
) -> list[LeaveRequestResponse]:
    """All requests for managers, the caller's own requests otherwise."""
    entries = await LeaveService(session).list_requests(
        user_id=current_user.user_id,
        may_manage=can(current_user.role, Capability.MANAGE_LEAVE),
        status=status_filter,
    )
    return [LeaveRequestResponse.from_entry(entry) for entry in entries]


@router.post("/{request_id}/approve", response_model=LeaveRequestResponse)
async def approve_leave_request(
    request_id: str,
    current_user: CanReview,
    session: DbSession,
    request: LeaveApproveRequest | None = None,
) -> LeaveRequestResponse:
    entry = await LeaveService(session).approve(
        request_id,
        reviewer_id=current_user.user_id,
        notes=request.notes if request else None,
    )
    return LeaveRequestResponse.from_entry(entry)


@router.post("/{request_id}/reject", response_model=LeaveRequestResponse)
async def reject_leave_request(
    request_id: str,
    request: LeaveRejectRequest,
    current_user: CanReview,
    session: DbSession,
) -> LeaveRequestResponse:
    entry = await LeaveService(session).reject(
        request_id, reviewer_id=current_user.user_id, reason=request.reason
    )
    return LeaveRequestResponse.from_entry(entry)


@router.post("/{request_id}/cancel", response_model=LeaveRequestResponse)
async def cancel_leave_request(
    request_id: str,
    current_user: CanRequest,
    session: DbSession,
) -> LeaveRequestResponse:
    entry = await LeaveService(session).cancel(
        request_id,
        user_id=current_user.user_id,
        may_manage=can(current_user.role, Capability.MANAGE_LEAVE),
    )
    return LeaveRequestResponse.from_entry(entry)

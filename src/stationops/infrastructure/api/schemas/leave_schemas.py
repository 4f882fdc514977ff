"""Pydantic schemas for leave requests."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from stationops.domain.services.leave_service import LeaveEntry

LeaveTypeName = Literal["vacation", "sick", "personal", "unpaid", "emergency"]


class LeaveRequestCreate(BaseModel):
    """Body for filing leave.

    ``employee_id`` defaults to the caller's own staff record; only managers
    may name someone else.
    """

    leave_type: LeaveTypeName = "vacation"
    start_date: date
    end_date: date
    reason: str = Field(..., min_length=1, max_length=2000)
    employee_id: str | None = None

    @model_validator(mode="after")
    def check_period(self) -> "LeaveRequestCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class LeaveApproveRequest(BaseModel):
    notes: str | None = Field(None, max_length=2000)


class LeaveRejectRequest(BaseModel):
    reason: str = Field(..., min_length=1, max_length=2000)


class LeaveRequestResponse(BaseModel):
    id: str
    employee_id: str
    employee_code: str
    employee_name: str
    requested_by: str
    leave_type: str
    start_date: date
    end_date: date
    days: int
    reason: str
    status: str
    requested_at: datetime
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    review_notes: str | None = None

    @classmethod
    def from_entry(cls, entry: LeaveEntry) -> "LeaveRequestResponse":
        request = entry.request
        return cls(
            id=request.id,
            employee_id=request.employee_id,
            employee_code=entry.employee.employee_code,
            employee_name=entry.employee.name,
            requested_by=request.requested_by,
            leave_type=request.leave_type,
            start_date=request.start_date,
            end_date=request.end_date,
            days=request.days,
            reason=request.reason,
            status=request.status,
            requested_at=request.requested_at,
            reviewed_by=request.reviewed_by,
            reviewed_at=request.reviewed_at,
            review_notes=request.review_notes,
        )

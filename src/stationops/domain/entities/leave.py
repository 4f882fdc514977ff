"""Leave request states and types."""

from datetime import date
from enum import Enum


class LeaveStatus(str, Enum):
    """Lifecycle of a leave request.

    Requests start pending. A manager approves or rejects them, or the
    requester cancels them. The three outcomes are final.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    @property
    def is_final(self) -> bool:
        return self is not LeaveStatus.PENDING


class LeaveType(str, Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    UNPAID = "unpaid"
    EMERGENCY = "emergency"


def leave_days(start_date: date, end_date: date) -> int:
    """Calendar days covered by a leave period, both ends included."""
    return (end_date - start_date).days + 1

"""Domain entities for StationOps.

Entities are plain Python types that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from stationops.domain.entities.invitation import (
    InvitationLookup,
    InvitationStatus,
    RedemptionStatus,
    as_utc,
    classify_invitation,
    invitation_status,
)
from stationops.domain.entities.leave import LeaveStatus, LeaveType, leave_days
from stationops.domain.entities.record_kind import RecordKind
from stationops.domain.entities.role import UserRole

__all__ = [
    "InvitationLookup",
    "InvitationStatus",
    "LeaveStatus",
    "LeaveType",
    "RecordKind",
    "RedemptionStatus",
    "UserRole",
    "as_utc",
    "classify_invitation",
    "invitation_status",
    "leave_days",
]

"""Pydantic request and response schemas."""

from stationops.infrastructure.api.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
)
from stationops.infrastructure.api.schemas.invitation_schemas import (
    InvitationAcceptRequest,
    InvitationCreatedResponse,
    InvitationCreateRequest,
    InvitationListResponse,
    InvitationLookupResponse,
    InvitationResentResponse,
    InvitationResponse,
)
from stationops.infrastructure.api.schemas.leave_schemas import (
    LeaveApproveRequest,
    LeaveRejectRequest,
    LeaveRequestCreate,
    LeaveRequestResponse,
)
from stationops.infrastructure.api.schemas.record_schemas import (
    ClientCreateRequest,
    ClientResponse,
    ClientUpdateRequest,
    EmployeeCreateRequest,
    EmployeeResponse,
    EmployeeUpdateRequest,
    HumanIdParseResponse,
)
from stationops.infrastructure.api.schemas.schedule_schemas import (
    AdSlotCreateRequest,
    AdSlotResponse,
    AdSlotUpdateRequest,
    GridDayResponse,
    ShowCreateRequest,
    ShowResponse,
    ShowUpdateRequest,
    WeekGridResponse,
)
from stationops.infrastructure.api.schemas.user_schemas import (
    ActiveUserResponse,
    UserListResponse,
)

__all__ = [
    "ActiveUserResponse",
    "AdSlotCreateRequest",
    "AdSlotResponse",
    "AdSlotUpdateRequest",
    "AuthResponse",
    "ClientCreateRequest",
    "ClientResponse",
    "ClientUpdateRequest",
    "EmployeeCreateRequest",
    "EmployeeResponse",
    "EmployeeUpdateRequest",
    "GridDayResponse",
    "HumanIdParseResponse",
    "InvitationAcceptRequest",
    "InvitationCreateRequest",
    "InvitationCreatedResponse",
    "InvitationListResponse",
    "InvitationLookupResponse",
    "InvitationResentResponse",
    "InvitationResponse",
    "LeaveApproveRequest",
    "LeaveRejectRequest",
    "LeaveRequestCreate",
    "LeaveRequestResponse",
    "LoginRequest",
    "ProfileResponse",
    "ShowCreateRequest",
    "ShowResponse",
    "ShowUpdateRequest",
    "UserListResponse",
    "WeekGridResponse",
]

"""Pydantic schemas for invitation API endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from stationops.domain.entities.invitation import (
    InvitationStatus,
    RedemptionStatus,
    invitation_status,
)
from stationops.domain.entities.role import UserRole


class InvitationCreateRequest(BaseModel):
    """Request schema for creating an invitation."""

    email: EmailStr = Field(..., description="Email address of the user to invite")
    role: UserRole = Field(UserRole.EMPLOYEE, description="Role granted on acceptance")
    department: str | None = Field(
        None,
        max_length=100,
        description="Department, kept only for employee and manager roles",
    )


class InvitationResponse(BaseModel):
    """Invitation details. The token is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    role: UserRole
    department: str | None = None
    invited_by: str
    expires_at: datetime
    accepted_at: datetime | None = None
    created_at: datetime
    email_sent: bool = False
    email_sent_at: datetime | None = None
    status: InvitationStatus

    @classmethod
    def from_model(cls, invitation, now: datetime | None = None) -> "InvitationResponse":
        return cls(
            id=invitation.id,
            email=invitation.email,
            role=invitation.role,
            department=invitation.department,
            invited_by=invitation.invited_by,
            expires_at=invitation.expires_at,
            accepted_at=invitation.accepted_at,
            created_at=invitation.created_at,
            email_sent=invitation.email_sent,
            email_sent_at=invitation.email_sent_at,
            status=invitation_status(invitation, now),
        )


class InvitationCreatedResponse(BaseModel):
    """Returned to the inviter, who may share ``invite_url`` by hand."""

    invitation: InvitationResponse
    invite_url: str
    email_sent: bool


class InvitationResentResponse(BaseModel):
    invitation: InvitationResponse
    invite_url: str


class InvitationListResponse(BaseModel):
    invitations: list[InvitationResponse]
    total: int


class InvitationLookupResponse(BaseModel):
    """What the redemption page needs to know about a token."""

    status: RedemptionStatus
    email: str | None = None
    role: UserRole | None = None
    department: str | None = None
    expires_at: datetime | None = None


class InvitationAcceptRequest(BaseModel):
    """Request schema for redeeming an invitation."""

    display_name: str = Field(..., max_length=255, description="Full name of the new user")
    password: str = Field(..., max_length=128, description="Password for the new account")

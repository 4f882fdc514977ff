"""Invitation API routes.

Staff endpoints create, list, resend and delete invitations. The two
``/token/{token}`` endpoints are public: they back the redemption page that
the emailed link opens.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from stationops.core.logging import get_logger
from stationops.domain.entities.invitation import InvitationStatus
from stationops.domain.services.access_policy import Capability, require_invite
from stationops.domain.services.invitation_service import InvitationService
from stationops.infrastructure.api.dependencies import (
    CurrentUser,
    DbSession,
    Mailer,
    require_capability,
)
from stationops.infrastructure.api.schemas import (
    AuthResponse,
    InvitationAcceptRequest,
    InvitationCreatedResponse,
    InvitationCreateRequest,
    InvitationListResponse,
    InvitationLookupResponse,
    InvitationResentResponse,
    InvitationResponse,
    ProfileResponse,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationCreatedResponse,
    responses={
        403: {"description": "Caller may not invite, or may not grant this role"},
        409: {"description": "Email already registered or already invited"},
    },
)
async def create_invitation(
    request: InvitationCreateRequest,
    current_user: Annotated[CurrentUser, Depends(require_capability(Capability.INVITE_USERS))],
    session: DbSession,
    email_service: Mailer,
) -> InvitationCreatedResponse:
    """Invite someone by email.

    The response carries the redemption link so it can be shared by hand
    when ``email_sent`` is false.
    """
    require_invite(current_user.role, request.role)

    service = InvitationService(session, email_service=email_service)
    created = await service.create_invitation(
        email=request.email,
        role=request.role,
        department=request.department,
        invited_by=current_user.user_id,
    )
    return InvitationCreatedResponse(
        invitation=InvitationResponse.from_model(created.invitation),
        invite_url=created.invite_url,
        email_sent=created.email_sent,
    )


@router.get("", response_model=InvitationListResponse)
async def list_invitations(
    _: Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_INVITATIONS))],
    session: DbSession,
    status_filter: Annotated[InvitationStatus | None, Query(alias="status")] = None,
) -> InvitationListResponse:
    """List invitations, newest first."""
    service = InvitationService(session)
    invitations = await service.list_invitations(status=status_filter)
    now = service.clock()
    return InvitationListResponse(
        invitations=[InvitationResponse.from_model(i, now) for i in invitations],
        total=len(invitations),
    )


@router.post(
    "/{invitation_id}/resend",
    response_model=InvitationResentResponse,
    responses={
        404: {"description": "Invitation not found"},
        409: {"description": "Invitation already accepted"},
    },
)
async def resend_invitation(
    invitation_id: str,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.INVITE_USERS))],
    session: DbSession,
) -> InvitationResentResponse:
    """Replace the token and expiry. The previous link stops working."""
    service = InvitationService(session)
    resent = await service.resend_invitation(invitation_id)
    return InvitationResentResponse(
        invitation=InvitationResponse.from_model(resent.invitation),
        invite_url=resent.invite_url,
    )


@router.delete(
    "/{invitation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Invitation not found"}},
)
async def delete_invitation(
    invitation_id: str,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.DELETE_INVITATIONS))],
    session: DbSession,
) -> None:
    await InvitationService(session).delete_invitation(invitation_id)


@router.get("/token/{token}", response_model=InvitationLookupResponse)
async def get_invitation_by_token(token: str, session: DbSession) -> InvitationLookupResponse:
    """Classify a token for the redemption page.

    Always 200; ``status`` says whether the invitation can be redeemed.
    """
    lookup = await InvitationService(session).fetch_invitation_by_token(token)
    invitation = lookup.invitation
    if invitation is None:
        return InvitationLookupResponse(status=lookup.status)
    return InvitationLookupResponse(
        status=lookup.status,
        email=invitation.email,
        role=invitation.role,
        department=invitation.department,
        expires_at=invitation.expires_at,
    )


@router.post(
    "/token/{token}/accept",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses={
        400: {"description": "Invalid name or weak password"},
        404: {"description": "Unknown token"},
        409: {"description": "Invitation already used"},
        410: {"description": "Invitation expired"},
        503: {"description": "Profile could not be written; retry"},
    },
)
async def accept_invitation(
    token: str,
    request: InvitationAcceptRequest,
    session: DbSession,
) -> AuthResponse:
    """Redeem an invitation, create the account and sign the user in."""
    accepted = await InvitationService(session).accept_invitation(
        token=token,
        display_name=request.display_name,
        password=request.password,
    )
    return AuthResponse(
        access_token=accepted.access_token,
        expires_in=accepted.expires_in,
        user=ProfileResponse(
            id=accepted.user.id,
            email=accepted.user.email,
            display_name=accepted.profile.display_name,
            role=accepted.profile.role,
            department=accepted.profile.department,
        ),
    )

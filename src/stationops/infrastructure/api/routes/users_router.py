"""User listing routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from stationops.domain.services.access_policy import Capability
from stationops.domain.services.invitation_service import InvitationService
from stationops.infrastructure.api.dependencies import (
    CurrentUser,
    DbSession,
    require_capability,
)
from stationops.infrastructure.api.schemas import ActiveUserResponse, UserListResponse

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    _: Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_USERS))],
    session: DbSession,
) -> UserListResponse:
    """Active users with their profiles, newest first."""
    users = await InvitationService(session).list_active_users()
    return UserListResponse(
        users=[ActiveUserResponse.model_validate(u) for u in users],
        total=len(users),
    )

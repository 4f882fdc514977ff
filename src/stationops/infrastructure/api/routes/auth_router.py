"""Authentication routes."""

from fastapi import APIRouter

from stationops.core.exceptions import RecordNotFoundError
from stationops.domain.services.account_service import AccountService
from stationops.infrastructure.api.dependencies import AuthenticatedUser, DbSession
from stationops.infrastructure.api.schemas import AuthResponse, LoginRequest, ProfileResponse
from stationops.infrastructure.auth import jwt_service
from stationops.infrastructure.persistence.repositories import ProfileRepository

router = APIRouter()


@router.post("/login", response_model=AuthResponse, responses={401: {"description": "Bad credentials"}})
async def login(request: LoginRequest, session: DbSession) -> AuthResponse:
    """Exchange email and password for an access token."""
    user, profile = await AccountService(session).authenticate(request.email, request.password)
    role = profile.role if profile else None
    return AuthResponse(
        access_token=jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            role=role or "",
        ),
        expires_in=jwt_service.get_expires_in(),
        user=ProfileResponse(
            id=user.id,
            email=user.email,
            display_name=profile.display_name if profile else None,
            role=role,
            department=profile.department if profile else None,
        ),
    )


@router.get("/me", response_model=ProfileResponse)
async def me(current_user: AuthenticatedUser, session: DbSession) -> ProfileResponse:
    """Profile of the token holder."""
    profile = await ProfileRepository(session).get_by_id(current_user.user_id)
    if profile is None:
        raise RecordNotFoundError("Profile not found")
    return ProfileResponse(
        id=profile.id,
        email=profile.email,
        display_name=profile.display_name,
        role=profile.role,
        department=profile.department,
    )

"""Pydantic schemas for authentication endpoints."""

from pydantic import BaseModel, EmailStr, Field

from stationops.domain.entities.role import UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class ProfileResponse(BaseModel):
    id: str
    email: str
    display_name: str | None = None
    role: UserRole | None = None
    department: str | None = None


class AuthResponse(BaseModel):
    """Access token plus the profile it was issued for."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: ProfileResponse

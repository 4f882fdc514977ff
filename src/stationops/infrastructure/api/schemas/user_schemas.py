"""Pydantic schemas for the users listing."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ActiveUserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    display_name: str | None = None
    role: str | None = None
    department: str | None = None
    created_at: datetime
    last_login: datetime | None = None


class UserListResponse(BaseModel):
    users: list[ActiveUserResponse]
    total: int

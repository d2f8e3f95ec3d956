"""Pydantic DTOs for user management."""

from datetime import datetime

from pydantic import BaseModel, Field

from backoffice.domain.entities import Role

from .common import EMAIL_PATTERN


class UserCreate(BaseModel):
    fullname: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=100, pattern=EMAIL_PATTERN)
    role: Role = Role.USER
    is_active: bool = True
    profile_pic: str | None = Field(None, max_length=255)


class UserRoleUpdate(BaseModel):
    role: Role


class UserStatusUpdate(BaseModel):
    is_active: bool


class UserResponse(BaseModel):
    id: str
    fullname: str
    email: str
    role: Role
    is_active: bool
    profile_pic: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

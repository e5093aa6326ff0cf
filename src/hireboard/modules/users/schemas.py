"""Pydantic schemas for user operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hireboard.core.constants import (
    MAX_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from hireboard.modules.roles.schemas import RoleDetail, RoleSummary
from hireboard.modules.users.models import User


# ============================================================
# User Schemas
# ============================================================


class UserBase(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class UserCreate(UserBase):
    """Schema for creating a portal user."""

    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    role_id: UUID | None = None
    is_active: bool = True


class UserUpdate(BaseModel):
    """Schema for updating a user.

    Only fields present in the request are changed; sending ``role_id: null``
    removes the user's role.
    """

    email: EmailStr | None = None
    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    role_id: UUID | None = None


class UserStatusUpdate(BaseModel):
    is_active: bool


class UserResponse(UserBase):
    """A user as shown in the admin user list."""

    id: UUID
    is_active: bool
    role: RoleSummary | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    items: list[UserResponse]
    total: int
    page: int
    page_size: int


class UserProfile(UserBase):
    """The signed-in user with their role's grants."""

    id: UUID
    is_active: bool
    created_at: datetime
    role: RoleDetail | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            is_active=user.is_active,
            created_at=user.created_at,
            role=RoleDetail.from_role(user.role) if user.role else None,
        )


# ============================================================
# Authentication Schemas
# ============================================================


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserProfile

"""Authentication API routes.

Provides endpoints for:
- Login with email and password
- The signed-in user's profile and grants
"""

from fastapi import APIRouter

from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.auth.service import AuthSvc
from hireboard.modules.users.schemas import LoginRequest, LoginResponse, UserProfile


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with email and password",
    description="Authenticate with email and password to receive an access token.",
)
async def login(data: LoginRequest, service: AuthSvc) -> LoginResponse:
    """Login with email and password."""
    user, token = await service.login(email=data.email, password=data.password)
    return LoginResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
        user=UserProfile.from_user(user),
    )


@router.get(
    "/me",
    response_model=UserProfile,
    summary="Get current user",
    description="Returns the signed-in user with their role and grants.",
)
async def get_me(current_user: CurrentUser) -> UserProfile:
    """Get current user profile."""
    return UserProfile.from_user(current_user)

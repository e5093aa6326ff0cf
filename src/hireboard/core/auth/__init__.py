"""Authentication: JWT access tokens and password handling."""

from hireboard.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from hireboard.core.auth.dependencies import (
    CurrentUser,
    OptionalUser,
    get_current_user,
    get_optional_user,
)
from hireboard.core.auth.middleware import RequestIdMiddleware, UserContextMiddleware
from hireboard.core.auth.schemas import AccessToken, TokenData


__all__ = [
    "AccessToken",
    # Dependencies
    "CurrentUser",
    "OptionalUser",
    # Middleware
    "RequestIdMiddleware",
    # Schemas
    "TokenData",
    "UserContextMiddleware",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_user",
    "get_optional_user",
    # Password utilities
    "hash_password",
    "verify_password",
]

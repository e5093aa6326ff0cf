"""Authentication schemas for token handling."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class TokenData(BaseModel):
    """Claims extracted from a JWT access token.

    Attributes:
        user_id: The user's UUID (``sub`` claim)
        email: Email at issue time
        role: Role name at issue time; informational only, permission checks
            always reload the role from the database
        exp: Token expiration time
        type: Token type
        jti: Unique token ID
    """

    user_id: UUID
    email: str | None = None
    role: str | None = None
    exp: datetime
    type: str = "access"
    jti: str | None = None


class AccessToken(BaseModel):
    """An issued access token."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int

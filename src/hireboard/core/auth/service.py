"""Authentication service for login and token issuance."""

from typing import Annotated

import structlog
from fastapi import Depends

from hireboard.api.dependencies import DBSession
from hireboard.config import settings
from hireboard.core.auth.backend import create_access_token, verify_password
from hireboard.core.auth.schemas import AccessToken
from hireboard.core.errors import UnauthorizedError
from hireboard.modules.users.models import User
from hireboard.modules.users.repos import UserRepository


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.user_repo = UserRepository(db)

    async def login(self, email: str, password: str) -> tuple[User, AccessToken]:
        """Authenticate a user with email and password.

        Unknown emails, wrong passwords and deactivated accounts all fail
        with the same error so that login cannot be used to enumerate accounts.

        Args:
            email: User's email address
            password: Plain text password

        Returns:
            Tuple of (user, access_token)

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        user = await self.user_repo.get_by_email(email)
        if (
            not user
            or not verify_password(password, user.password_hash)
            or not user.is_active
        ):
            logger.info("login_failed", email=email)
            raise UnauthorizedError(
                "Invalid email or password",
                error_code="invalid_credentials",
            )

        token = self.issue_token(user)
        logger.info("login_succeeded", user_id=str(user.id))
        return user, token

    def issue_token(self, user: User) -> AccessToken:
        access_token = create_access_token(
            user.id,
            email=user.email,
            role=user.role.name if user.role else None,
        )
        return AccessToken(
            access_token=access_token,
            expires_in=settings.access_token_expire_minutes * 60,
        )


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]

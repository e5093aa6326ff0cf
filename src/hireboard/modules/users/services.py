"""User service for business logic."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from hireboard.core.auth.backend import hash_password
from hireboard.core.errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from hireboard.core.permissions.checker import PermissionChecker
from hireboard.modules.users.models import User
from hireboard.modules.users.repos import UserRepo
from hireboard.modules.users.schemas import UserCreate, UserUpdate


class UserService:
    """Service for portal user management.

    Contains business logic for user CRUD operations, role assignment
    and account status.
    """

    def __init__(self, repo: UserRepo) -> None:
        self.repo = repo

    async def _ensure_role_exists(self, role_id: UUID | None) -> None:
        if role_id is None:
            return
        if not await self.repo.role_exists(role_id):
            raise BadRequestError(
                "Invalid role",
                error_code="invalid_role",
                details={"role_id": str(role_id)},
            )

    async def _ensure_email_free(self, email: str) -> None:
        if await self.repo.get_by_email(email):
            raise ConflictError(
                "Email already registered",
                error_code="email_exists",
                details={"email": email},
            )

    async def create_user(self, data: UserCreate, creator_id: UUID | None = None) -> User:
        """Create a new portal user.

        Args:
            data: User creation data
            creator_id: The user performing the action, if any

        Returns:
            The created user

        Raises:
            ConflictError: If the email is already registered
            BadRequestError: If role_id does not name a role
        """
        await self._ensure_email_free(data.email)
        await self._ensure_role_exists(data.role_id)

        user = User(
            email=data.email,
            name=data.name,
            password_hash=hash_password(data.password),
            role_id=data.role_id,
            is_active=data.is_active,
        )
        return await self.repo.create(user)

    async def get_user(self, user_id: UUID) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.repo.get_by_id(user_id)
        if not user:
            raise NotFoundError(
                "User not found",
                resource="user",
                resource_id=str(user_id),
            )
        return user

    async def list_users(
        self,
        page: int = 1,
        page_size: int = 20,
        search: str | None = None,
    ) -> tuple[list[User], int]:
        return await self.repo.list_page(page, page_size, search)

    async def update_user(self, user_id: UUID, data: UserUpdate, actor_id: UUID) -> User:
        """Update a user's profile and, optionally, their role.

        Changing ``role_id`` needs roles:assign on top of users:update.

        Args:
            user_id: The user's UUID
            data: Update data; only fields present in the request apply
            actor_id: The user performing the action

        Returns:
            The updated user

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new email is taken
            BadRequestError: If the new role does not exist
            ForbiddenError: If the actor may not assign roles
        """
        user = await self.get_user(user_id)

        # Checks run before any attribute changes; the permission lookup
        # reloads the actor's row.
        change_role = "role_id" in data.model_fields_set and data.role_id != user.role_id
        if change_role:
            checker = PermissionChecker(self.repo.session)
            if not await checker.has_permission(actor_id, "roles", "assign"):
                raise ForbiddenError()
            await self._ensure_role_exists(data.role_id)

        change_email = bool(data.email) and data.email.lower() != user.email.lower()
        if change_email:
            await self._ensure_email_free(data.email)

        if change_email:
            user.email = data.email
        if data.name:
            user.name = data.name
        if change_role:
            user.role_id = data.role_id

        return await self.repo.update(user)

    async def set_status(self, user_id: UUID, is_active: bool, actor_id: UUID) -> User:
        """Activate or deactivate a user.

        Raises:
            BadRequestError: If the actor tries to deactivate themselves
        """
        if user_id == actor_id and not is_active:
            raise BadRequestError(
                "You cannot deactivate your own account",
                error_code="cannot_modify_self",
            )
        user = await self.get_user(user_id)
        user.is_active = is_active
        return await self.repo.update(user)

    async def delete_user(self, user_id: UUID, actor_id: UUID) -> None:
        """Delete a user.

        Raises:
            BadRequestError: If the actor tries to delete themselves
        """
        if user_id == actor_id:
            raise BadRequestError(
                "You cannot delete your own account",
                error_code="cannot_modify_self",
            )
        user = await self.get_user(user_id)
        await self.repo.delete(user)


# Type alias for dependency injection
UserSvc = Annotated[UserService, Depends(UserService)]

"""User database models."""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hireboard.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH
from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin


if TYPE_CHECKING:
    from hireboard.core.permissions.models import Role


class User(Base, UUIDMixin, TimestampMixin):
    """An admin-portal account.

    Candidates never log in; users are recruiters, managers and admins.

    Attributes:
        email: Unique login email
        name: Display name
        password_hash: Bcrypt hash
        is_active: Whether the user can log in
        role_id: The single role the user holds, if any
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    role_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("roles.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    role: Mapped["Role | None"] = relationship(
        "Role",
        back_populates="users",
        foreign_keys=[role_id],
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role_id={self.role_id})>"

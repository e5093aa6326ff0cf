"""Database layer - session management, base models, and mixins."""

from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin
from hireboard.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]

"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hireboard.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from hireboard.core.database import get_db


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]

# Pagination query parameters shared by list endpoints
Page = Annotated[int, Query(ge=1, description="Page number")]
PageSize = Annotated[
    int,
    Query(ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
]


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Return the number of pages needed for ``total`` items."""
    return (total + page_size - 1) // page_size

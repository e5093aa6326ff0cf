"""Application repository for database operations."""

from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import ColumnElement, func, select, update

from hireboard.api.dependencies import DBSession
from hireboard.modules.applications.models import Application
from hireboard.modules.jobs.models import Job


def _filters(status: str | None, archived: bool | None) -> list[ColumnElement[bool]]:
    conditions: list[ColumnElement[bool]] = []
    if archived is not None:
        conditions.append(Application.is_archived == archived)
    if status:
        conditions.append(Application.status == status)
    return conditions


class ApplicationRepository:
    """Repository for Application database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_by_id(self, application_id: UUID) -> Application | None:
        stmt = select(Application).where(Application.id == application_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_job(self, job_id: UUID) -> Job | None:
        """Load the job an application is submitted against, with its form."""
        stmt = select(Job).where(Job.id == job_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(
        self,
        page: int = 1,
        limit: int = 10,
        status: str | None = None,
        archived: bool | None = False,
    ) -> tuple[list[Application], int]:
        """List applications, newest first.

        Args:
            page: Page number (1-indexed)
            limit: Number of items per page
            status: Only applications in this status
            archived: False for the inbox, True for the archive, None for both

        Returns:
            Tuple of (applications list, total count)
        """
        conditions = _filters(status, archived)
        count_stmt = select(func.count()).select_from(Application).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        order = [Application.created_at.desc()]
        if archived:
            order.insert(0, Application.archived_at.desc())

        stmt = (
            select(Application)
            .where(*conditions)
            .order_by(*order)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def list_matching(
        self,
        status: str | None = None,
        archived: bool | None = False,
    ) -> list[Application]:
        """Every application matching the list filters, newest first."""
        stmt = (
            select(Application)
            .where(*_filters(status, archived))
            .order_by(Application.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, application: Application) -> Application:
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def update(self, application: Application) -> Application:
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def delete(self, application: Application) -> None:
        await self.session.delete(application)
        await self.session.flush()

    async def set_archived_many(
        self,
        application_ids: list[UUID],
        is_archived: bool,
        actor_id: UUID | None,
    ) -> int:
        """Archive or unarchive applications whose state differs.

        Returns:
            Number of applications changed
        """
        stmt = (
            update(Application)
            .where(
                Application.id.in_(application_ids),
                Application.is_archived == (not is_archived),
            )
            .values(
                is_archived=is_archived,
                archived_at=datetime.now(UTC) if is_archived else None,
                archived_by=actor_id if is_archived else None,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount


# Type alias for dependency injection
ApplicationRepo = Annotated[ApplicationRepository, Depends(ApplicationRepository)]

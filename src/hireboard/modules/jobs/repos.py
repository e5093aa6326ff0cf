"""Job repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, or_, select

from hireboard.api.dependencies import DBSession
from hireboard.core.database.filters import LIKE_ESCAPE, contains_pattern
from hireboard.modules.applications.models import Application
from hireboard.modules.forms.models import Form
from hireboard.modules.jobs.models import Job, JobStatus
from hireboard.modules.users.models import User


class JobRepository:
    """Repository for Job database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_by_id(self, job_id: UUID) -> Job | None:
        stmt = select(Job).where(Job.id == job_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(
        self,
        page: int = 1,
        limit: int = 10,
        status: str | None = None,
        search: str | None = None,
    ) -> tuple[list[tuple[Job, int]], int]:
        """List jobs, newest first, with their application counts.

        Args:
            page: Page number (1-indexed)
            limit: Number of items per page
            status: Only jobs in this status
            search: Case-insensitive substring of title, description,
                position or location

        Returns:
            Tuple of ([(job, application count)], total count)
        """
        conditions = []
        if status:
            conditions.append(Job.status == status)
        if search:
            pattern = contains_pattern(search)
            conditions.append(
                or_(
                    func.lower(Job.title).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Job.description).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Job.position).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Job.location).like(pattern, escape=LIKE_ESCAPE),
                )
            )

        count_stmt = select(func.count()).select_from(Job).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        applications_count = (
            select(func.count(Application.id))
            .where(Application.job_id == Job.id)
            .correlate(Job)
            .scalar_subquery()
        )
        stmt = (
            select(Job, applications_count)
            .where(*conditions)
            .order_by(Job.created_at.desc(), Job.title)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(job, count) for job, count in result.all()], total

    async def list_active(self) -> list[Job]:
        stmt = (
            select(Job)
            .where(Job.status == JobStatus.ACTIVE.value)
            .order_by(Job.created_at.desc(), Job.title)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_applications(self, job_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(Application)
            .where(Application.job_id == job_id)
        )
        return (await self.session.execute(stmt)).scalar_one()

    async def form_exists(self, form_id: UUID) -> bool:
        stmt = select(Form.id).where(Form.id == form_id)
        return (await self.session.execute(stmt)).scalar_one_or_none() is not None

    async def user_exists(self, user_id: UUID) -> bool:
        stmt = select(User.id).where(User.id == user_id)
        return (await self.session.execute(stmt)).scalar_one_or_none() is not None

    async def create(self, job: Job) -> Job:
        self.session.add(job)
        await self.session.flush()
        await self.session.refresh(job)
        return job

    async def update(self, job: Job) -> Job:
        await self.session.flush()
        await self.session.refresh(job)
        return job

    async def delete(self, job: Job) -> None:
        """Delete a job together with its applications."""
        await self.session.execute(
            delete(Application)
            .where(Application.job_id == job.id)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.delete(job)
        await self.session.flush()


# Type alias for dependency injection
JobRepo = Annotated[JobRepository, Depends(JobRepository)]

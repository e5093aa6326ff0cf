"""Read-only queries behind the dashboard."""

from datetime import datetime
from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from hireboard.api.dependencies import DBSession
from hireboard.modules.applications.models import Application
from hireboard.modules.jobs.models import Job
from hireboard.modules.users.models import User


class DashboardRepository:
    """Newest rows from the tables the activity feed draws on."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def recent_applications(self, limit: int) -> list[Application]:
        stmt = select(Application).order_by(Application.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def recent_jobs(self, limit: int) -> list[Job]:
        stmt = select(Job).order_by(Job.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def users_created_since(self, since: datetime, limit: int) -> list[User]:
        stmt = (
            select(User)
            .where(User.created_at >= since)
            .order_by(User.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


# Type alias for dependency injection
DashboardRepo = Annotated[DashboardRepository, Depends(DashboardRepository)]

"""Dashboard activity feed."""

from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import Depends

from hireboard.modules.applications.models import Application
from hireboard.modules.dashboard.repos import DashboardRepo
from hireboard.modules.dashboard.schemas import ActivityItem, ActivityType
from hireboard.modules.jobs.models import Job
from hireboard.modules.users.models import User


ACTIVITY_LIMIT = 10
RECENT_APPLICATIONS = 5
RECENT_JOBS = 3
RECENT_USERS = 3
NEW_USER_WINDOW = timedelta(days=7)

UNKNOWN = "Unknown"

# form_data labels a candidate's name may have been submitted under
_NAME_LABELS = ("Full Name", "Name", "name", "candidateName")


def candidate_display_name(application: Application) -> str:
    if application.candidate_name:
        return application.candidate_name
    for label in _NAME_LABELS:
        value = (application.form_data or {}).get(label)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return UNKNOWN


def application_activity(application: Application) -> ActivityItem:
    return ActivityItem(
        id=f"app-{application.id}",
        type=ActivityType.APPLICATION,
        title="New Application Received",
        description=f"{candidate_display_name(application)} applied for "
        f"{application.job_title or UNKNOWN}",
        timestamp=application.created_at,
    )


def job_activity(job: Job) -> ActivityItem:
    creator = job.creator.name if job.creator else UNKNOWN
    return ActivityItem(
        id=f"job-{job.id}",
        type=ActivityType.JOB,
        title="New Job Posted",
        description=f'{creator} posted "{job.title}"',
        timestamp=job.created_at,
    )


def user_activity(user: User) -> ActivityItem:
    role = user.role.name if user.role else "no role"
    return ActivityItem(
        id=f"user-{user.id}",
        type=ActivityType.USER,
        title="New User Registered",
        description=f"{user.name} joined as {role}",
        timestamp=user.created_at,
    )


def merge_activity(items: list[ActivityItem], limit: int = ACTIVITY_LIMIT) -> list[ActivityItem]:
    """Newest first, at most ``limit`` items."""
    return sorted(items, key=lambda item: item.timestamp, reverse=True)[:limit]


class DashboardService:
    """Service for the admin dashboard."""

    def __init__(self, repo: DashboardRepo) -> None:
        self.repo = repo

    async def recent_activity(self, now: datetime | None = None) -> list[ActivityItem]:
        """The latest applications, job postings and new users, merged.

        Users only appear if they were created in the last seven days.
        """
        now = now or datetime.now(UTC)
        applications = await self.repo.recent_applications(RECENT_APPLICATIONS)
        jobs = await self.repo.recent_jobs(RECENT_JOBS)
        users = await self.repo.users_created_since(now - NEW_USER_WINDOW, RECENT_USERS)

        items = (
            [application_activity(a) for a in applications]
            + [job_activity(j) for j in jobs]
            + [user_activity(u) for u in users]
        )
        return merge_activity(items)


# Type alias for dependency injection
DashboardSvc = Annotated[DashboardService, Depends(DashboardService)]

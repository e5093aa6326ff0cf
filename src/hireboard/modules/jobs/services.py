"""Job posting service."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from hireboard.config import settings
from hireboard.core.errors import BadRequestError, ForbiddenError, NotFoundError
from hireboard.core.permissions.checker import PermissionChecker
from hireboard.modules.jobs.models import Job, JobStatus
from hireboard.modules.jobs.repos import JobRepo
from hireboard.modules.jobs.schemas import (
    JobCreate,
    JobResponse,
    JobUpdate,
    PublicFormResponse,
    PublicJobDetail,
    PublicJobResponse,
)


logger = structlog.get_logger()

_IMAGE_BASE = "https://images.unsplash.com"

DEPARTMENT_IMAGES = {
    "Design": f"{_IMAGE_BASE}/photo-1561070791-2526d30994b5?w=800&h=400&fit=crop",
    "Development": f"{_IMAGE_BASE}/photo-1498050108023-c5249f4df085?w=800&h=400&fit=crop",
    "Marketing": f"{_IMAGE_BASE}/photo-1460925895917-afdab827c52f?w=800&h=400&fit=crop",
    "Sales": f"{_IMAGE_BASE}/photo-1556761175-b413da4baf72?w=800&h=400&fit=crop",
    "HR": f"{_IMAGE_BASE}/photo-1521737711867-e3b97375f902?w=800&h=400&fit=crop",
    "Finance": f"{_IMAGE_BASE}/photo-1554224155-8d04cb21cd6c?w=800&h=400&fit=crop",
    "Engineering": f"{_IMAGE_BASE}/photo-1581092160562-40aa08e78837?w=800&h=400&fit=crop",
    "Video Editing": f"{_IMAGE_BASE}/photo-1574717024653-61fd2cf4d44d?w=800&h=400&fit=crop",
    "Graphic Design": f"{_IMAGE_BASE}/photo-1626785774573-4b799315345d?w=800&h=400&fit=crop",
    "Content Writing": f"{_IMAGE_BASE}/photo-1455390582262-044cdead277a?w=800&h=400&fit=crop",
}
DEFAULT_JOB_IMAGE = f"{_IMAGE_BASE}/photo-1486312338219-ce68d2c6f44d?w=800&h=400&fit=crop"

_REQUIRED_FIELDS = frozenset({"title", "description", "position", "status"})

# (keywords in the position, department image to use); first match wins
_POSITION_KEYWORDS = [
    (("designer", "design"), "Design"),
    (("developer", "engineer"), "Development"),
    (("video", "editor"), "Video Editing"),
    (("writer", "content"), "Content Writing"),
    (("marketing",), "Marketing"),
]


def generate_embed_code(job_id: UUID, base_url: str | None = None) -> str:
    """Return the HTML snippet that embeds a job's apply page in an iframe."""
    base_url = (base_url or settings.public_app_url).rstrip("/")
    return f"""<script>
  (function() {{
    var iframe = document.createElement('iframe');
    iframe.src = '{base_url}/embed/job/{job_id}';
    iframe.width = '100%';
    iframe.height = '600';
    iframe.frameBorder = '0';
    iframe.style.border = 'none';
    document.getElementById('job-portal-widget').appendChild(iframe);
  }})();
</script>
<div id="job-portal-widget"></div>"""


def default_image_url(department: str | None, position: str | None) -> str:
    """Pick a stock image for a job without an uploaded one."""
    if department and department in DEPARTMENT_IMAGES:
        return DEPARTMENT_IMAGES[department]
    if position:
        lowered = position.lower()
        for keywords, key in _POSITION_KEYWORDS:
            if any(k in lowered for k in keywords):
                return DEPARTMENT_IMAGES[key]
    return DEFAULT_JOB_IMAGE


def to_response(job: Job, applications_count: int) -> JobResponse:
    response = JobResponse.model_validate(job)
    response.applications_count = applications_count
    return response


def to_public_response(job: Job, with_form: bool = False) -> PublicJobResponse:
    """Shape a job for the careers page, optionally with its form."""
    form = job.form
    fields = dict(
        id=job.id,
        title=job.title,
        description=job.description,
        position=job.position,
        department=job.department,
        location=job.location,
        salary=job.salary,
        experience_level=job.experience_level,
        status=job.status,
        created_at=job.created_at,
        form_id=form.id if form else None,
        form_name=form.name if form else None,
        image_url=job.image_url or default_image_url(job.department, job.position),
        banner_image_url=job.banner_image_url,
    )
    if with_form:
        return PublicJobDetail(
            **fields,
            form=PublicFormResponse.model_validate(form) if form else None,
        )
    return PublicJobResponse(**fields)


class JobService:
    """Service for job posting management and the public careers feed."""

    def __init__(self, repo: JobRepo) -> None:
        self.repo = repo

    async def _ensure_allowed(self, actor_id: UUID | None, actions: list[str]) -> None:
        """Require the extra ``jobs:*`` grants some changes need.

        Assigning a job needs jobs:assign and pausing or resuming it needs
        jobs:pause, on top of the route's jobs:create or jobs:update.
        """
        if actor_id is None or not actions:
            return
        checker = PermissionChecker(self.repo.session)
        if not await checker.has_all_permissions(actor_id, [("jobs", a) for a in actions]):
            raise ForbiddenError()

    async def _validate_refs(self, form_id: UUID | None, assignee_id: UUID | None) -> None:
        if form_id is not None and not await self.repo.form_exists(form_id):
            raise BadRequestError(
                "Invalid form",
                error_code="invalid_form",
                details={"form_id": str(form_id)},
            )
        if assignee_id is not None and not await self.repo.user_exists(assignee_id):
            raise BadRequestError(
                "Invalid assignee",
                error_code="invalid_assignee",
                details={"assignee_id": str(assignee_id)},
            )

    async def get_job(self, job_id: UUID) -> Job:
        """Get a job by ID.

        Raises:
            NotFoundError: If job not found
        """
        job = await self.repo.get_by_id(job_id)
        if not job:
            raise NotFoundError(
                "Job not found",
                resource="job",
                resource_id=str(job_id),
            )
        return job

    async def describe_job(self, job_id: UUID) -> JobResponse:
        job = await self.get_job(job_id)
        return to_response(job, await self.repo.count_applications(job.id))

    async def list_jobs(
        self,
        page: int = 1,
        limit: int = 10,
        status: JobStatus | None = None,
        search: str | None = None,
    ) -> tuple[list[JobResponse], int]:
        rows, total = await self.repo.list_page(
            page,
            limit,
            status=status.value if status else None,
            search=search,
        )
        return [to_response(job, count) for job, count in rows], total

    async def create_job(self, data: JobCreate, creator_id: UUID | None = None) -> JobResponse:
        """Create a job and its embed snippet.

        Raises:
            ForbiddenError: If the creator may not assign or pause jobs
                and the request does
            BadRequestError: If the form or assignee does not exist
        """
        actions = []
        if data.assignee_id is not None:
            actions.append("assign")
        if data.status is JobStatus.PAUSED:
            actions.append("pause")
        await self._ensure_allowed(creator_id, actions)
        await self._validate_refs(data.form_id, data.assignee_id)

        job = Job(
            **data.model_dump(exclude={"status"}),
            status=data.status.value,
            creator_id=creator_id,
        )
        job = await self.repo.create(job)
        job.embed_code = generate_embed_code(job.id)
        job = await self.repo.update(job)

        logger.info("job_created", job_id=str(job.id), title=job.title)
        return to_response(job, 0)

    async def update_job(
        self,
        job_id: UUID,
        data: JobUpdate,
        actor_id: UUID | None = None,
    ) -> JobResponse:
        """Update a job; only fields present in the request apply.

        Raises:
            NotFoundError: If job not found
            ForbiddenError: If the change reassigns, pauses or resumes the job
                without jobs:assign or jobs:pause
            BadRequestError: If the form or assignee does not exist
        """
        job = await self.get_job(job_id)
        changes = data.model_dump(exclude_unset=True)

        actions = []
        if "assignee_id" in changes and changes["assignee_id"] != job.assignee_id:
            actions.append("assign")
        status = changes.get("status")
        if status is not None and status != job.status and JobStatus.PAUSED in (status, job.status):
            actions.append("pause")
        await self._ensure_allowed(actor_id, actions)

        await self._validate_refs(changes.get("form_id"), changes.get("assignee_id"))

        for field, value in changes.items():
            if value is None and field in _REQUIRED_FIELDS:
                continue
            if isinstance(value, JobStatus):
                value = value.value
            setattr(job, field, value)

        job = await self.repo.update(job)
        if actions:
            logger.info("job_updated", job_id=str(job.id), actions=actions)
        return to_response(job, await self.repo.count_applications(job.id))

    async def delete_job(self, job_id: UUID) -> None:
        """Delete a job and its applications."""
        job = await self.get_job(job_id)
        await self.repo.delete(job)
        logger.info("job_deleted", job_id=str(job_id))

    async def list_public_jobs(self) -> list[Job]:
        return await self.repo.list_active()

    async def get_public_job(self, job_id: UUID) -> Job:
        """Get an ACTIVE job for the careers page.

        Raises:
            NotFoundError: If the job does not exist or is not ACTIVE
        """
        job = await self.repo.get_by_id(job_id)
        if not job or job.status != JobStatus.ACTIVE:
            raise NotFoundError(
                "Job not found",
                resource="job",
                resource_id=str(job_id),
            )
        return job


# Type alias for dependency injection
JobSvc = Annotated[JobService, Depends(JobService)]

"""Application intake and review service."""

from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from hireboard.core.errors import BadRequestError, NotFoundError, ValidationError
from hireboard.modules.applications.export import applications_csv
from hireboard.modules.applications.intake import (
    extract_candidate,
    missing_required,
    relabel_form_data,
)
from hireboard.modules.applications.models import Application, ApplicationStatus
from hireboard.modules.applications.repos import ApplicationRepo
from hireboard.modules.applications.schemas import ApplicationSubmit
from hireboard.modules.jobs.models import Job, JobStatus


logger = structlog.get_logger()


def form_labels(job: Job) -> dict[str, str]:
    """Map every key a form field may be submitted under to its label."""
    labels: dict[str, str] = {}
    if job.form:
        for field in job.form.fields:
            labels[str(field.id)] = field.label
            if field.field_id:
                labels[field.field_id] = field.label
    return labels


def required_labels(job: Job) -> list[str]:
    if not job.form:
        return []
    return [field.label for field in job.form.fields if field.is_required]


def archive_filter(include_archived: bool, archived_only: bool) -> bool | None:
    """False for the inbox, True for the archive, None for both."""
    if archived_only:
        return True
    if include_archived:
        return None
    return False


class ApplicationService:
    """Service for public submissions and the review pipeline."""

    def __init__(self, repo: ApplicationRepo) -> None:
        self.repo = repo

    async def submit(
        self,
        data: ApplicationSubmit,
        *,
        source_domain: str | None = None,
        source_url: str | None = None,
        user_agent: str | None = None,
        ip_address: str | None = None,
    ) -> Application:
        """Record a candidate's submission.

        Raises:
            NotFoundError: If the job does not exist
            BadRequestError: If the job is not ACTIVE
            ValidationError: If a required form field is empty
        """
        job = await self.repo.get_job(data.job_id)
        if not job:
            raise NotFoundError(
                "Job not found",
                resource="job",
                resource_id=str(data.job_id),
            )
        if job.status != JobStatus.ACTIVE:
            raise BadRequestError(
                "This job is no longer accepting applications",
                error_code="job_not_accepting",
            )

        labelled = relabel_form_data(data.form_data, form_labels(job), data.field_labels)

        missing = missing_required(labelled, required_labels(job))
        if missing:
            raise ValidationError(
                "Missing required fields",
                errors=[{"field": label, "message": "This field is required"} for label in missing],
            )

        candidate = extract_candidate(labelled)
        application = Application(
            job_id=job.id,
            candidate_name=candidate.name,
            candidate_email=candidate.email,
            candidate_phone=candidate.phone,
            resume_file_name=candidate.resume_file_name,
            resume_path=candidate.resume_path,
            cover_letter=candidate.cover_letter,
            form_data=labelled,
            status=ApplicationStatus.PENDING.value,
            source_domain=source_domain,
            source_url=source_url,
            user_agent=user_agent,
            ip_address=ip_address,
        )
        application = await self.repo.create(application)
        logger.info(
            "application_submitted",
            application_id=str(application.id),
            job_id=str(job.id),
            source_domain=source_domain,
        )
        return application

    async def get_application(self, application_id: UUID) -> Application:
        """Get an application by ID.

        Raises:
            NotFoundError: If application not found
        """
        application = await self.repo.get_by_id(application_id)
        if not application:
            raise NotFoundError(
                "Application not found",
                resource="application",
                resource_id=str(application_id),
            )
        return application

    async def list_applications(
        self,
        page: int = 1,
        limit: int = 10,
        status: ApplicationStatus | None = None,
        include_archived: bool = False,
        archived_only: bool = False,
    ) -> tuple[list[Application], int]:
        return await self.repo.list_page(
            page,
            limit,
            status=status.value if status else None,
            archived=archive_filter(include_archived, archived_only),
        )

    async def export_applications(
        self,
        status: ApplicationStatus | None = None,
        include_archived: bool = False,
        archived_only: bool = False,
    ) -> str:
        """Every application matching the list filters, as CSV."""
        applications = await self.repo.list_matching(
            status=status.value if status else None,
            archived=archive_filter(include_archived, archived_only),
        )
        logger.info(
            "applications_exported",
            count=len(applications),
            status=status.value if status else None,
        )
        return applications_csv(applications)

    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus,
        remarks: str | None = None,
    ) -> Application:
        """Move an application through the pipeline.

        ``remarks`` replaces the stored remarks only when given.
        """
        application = await self.get_application(application_id)
        previous = application.status
        application.status = status.value
        if remarks is not None:
            application.remarks = remarks
        application = await self.repo.update(application)
        logger.info(
            "application_status_changed",
            application_id=str(application_id),
            previous=previous,
            status=status.value,
        )
        return application

    async def set_archived(
        self,
        application_id: UUID,
        is_archived: bool,
        actor_id: UUID,
    ) -> Application:
        """Archive or unarchive one application."""
        application = await self.get_application(application_id)
        application.is_archived = is_archived
        application.archived_at = datetime.now(UTC) if is_archived else None
        application.archived_by = actor_id if is_archived else None
        return await self.repo.update(application)

    async def set_archived_many(
        self,
        application_ids: list[UUID],
        is_archived: bool,
        actor_id: UUID,
    ) -> int:
        """Archive or unarchive many applications.

        Returns:
            Number of applications whose state changed

        Raises:
            BadRequestError: If no ids were given
        """
        if not application_ids:
            raise BadRequestError(
                "No applications selected",
                error_code="no_applications_selected",
            )
        count = await self.repo.set_archived_many(application_ids, is_archived, actor_id)
        logger.info(
            "applications_bulk_archived" if is_archived else "applications_bulk_unarchived",
            requested=len(application_ids),
            updated=count,
        )
        return count

    async def delete_application(self, application_id: UUID) -> None:
        application = await self.get_application(application_id)
        await self.repo.delete(application)


# Type alias for dependency injection
ApplicationSvc = Annotated[ApplicationService, Depends(ApplicationService)]

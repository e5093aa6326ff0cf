"""Email template service."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from hireboard.core.errors import ConflictError, NotFoundError
from hireboard.modules.email_templates.models import EmailTemplate, TemplateType
from hireboard.modules.email_templates.placeholders import extract_variables, render
from hireboard.modules.email_templates.repos import EmailTemplateRepo
from hireboard.modules.email_templates.schemas import (
    EmailTemplateCreate,
    EmailTemplateUpdate,
    PreviewResponse,
)


logger = structlog.get_logger()


class EmailTemplateService:
    """Service for notification template management."""

    def __init__(self, repo: EmailTemplateRepo) -> None:
        self.repo = repo

    async def list_templates(
        self, template_type: TemplateType | None = None
    ) -> list[EmailTemplate]:
        return await self.repo.list_all(template_type.value if template_type else None)

    async def get_template(self, template_id: UUID) -> EmailTemplate:
        """Get a template by ID.

        Raises:
            NotFoundError: If template not found
        """
        template = await self.repo.get_by_id(template_id)
        if not template:
            raise NotFoundError(
                "Email template not found",
                resource="email_template",
                resource_id=str(template_id),
            )
        return template

    async def _ensure_name_free(self, name: str, template_id: UUID | None = None) -> None:
        existing = await self.repo.get_by_name(name)
        if existing and existing.id != template_id:
            raise ConflictError(
                "An email template with this name already exists",
                error_code="template_exists",
                details={"name": name},
            )

    async def create_template(self, data: EmailTemplateCreate) -> EmailTemplate:
        """Create a template; its variables are read from the subject and body.

        Raises:
            ConflictError: If the name is taken
        """
        await self._ensure_name_free(data.name)
        template = EmailTemplate(
            name=data.name,
            type=data.type.value,
            subject=data.subject,
            body=data.body,
            variables=extract_variables(data.subject, data.body),
            is_active=data.is_active,
        )
        template = await self.repo.create(template)
        logger.info("email_template_created", template_id=str(template.id), type=template.type)
        return template

    async def update_template(self, template_id: UUID, data: EmailTemplateUpdate) -> EmailTemplate:
        """Replace a template's content.

        Raises:
            NotFoundError: If template not found
            ConflictError: If the new name is taken
        """
        template = await self.get_template(template_id)
        if data.name != template.name:
            await self._ensure_name_free(data.name, template.id)

        template.name = data.name
        template.type = data.type.value
        template.subject = data.subject
        template.body = data.body
        template.variables = extract_variables(data.subject, data.body)
        template.is_active = data.is_active
        return await self.repo.update(template)

    async def set_active(self, template_id: UUID, is_active: bool) -> EmailTemplate:
        template = await self.get_template(template_id)
        template.is_active = is_active
        template = await self.repo.update(template)
        logger.info(
            "email_template_activated" if is_active else "email_template_deactivated",
            template_id=str(template_id),
        )
        return template

    async def delete_template(self, template_id: UUID) -> None:
        template = await self.get_template(template_id)
        await self.repo.delete(template)
        logger.info("email_template_deleted", template_id=str(template_id))

    async def preview(self, template_id: UUID, values: dict[str, str]) -> PreviewResponse:
        """Render a template with sample values, reporting any left unfilled."""
        template = await self.get_template(template_id)
        return PreviewResponse(
            subject=render(template.subject, values),
            body=render(template.body, values),
            missing=[name for name in template.variables if name not in values],
        )


# Type alias for dependency injection
EmailTemplateSvc = Annotated[EmailTemplateService, Depends(EmailTemplateService)]

"""Email template API routes.

Reading templates requires email:read; every change requires email:update.
"""

from uuid import UUID

from fastapi import Query, status

from hireboard.api.dependencies import DBSession
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.permissions import require_permission
from hireboard.modules.email_templates import router
from hireboard.modules.email_templates.models import TemplateType
from hireboard.modules.email_templates.schemas import (
    EmailTemplateCreate,
    EmailTemplateListResponse,
    EmailTemplateResponse,
    EmailTemplateUpdate,
    PreviewRequest,
    PreviewResponse,
    TemplateStatusUpdate,
)
from hireboard.modules.email_templates.services import EmailTemplateSvc


@router.get("", response_model=EmailTemplateListResponse, summary="List email templates")
@require_permission("email", "read")
async def list_templates(
    service: EmailTemplateSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
    template_type: TemplateType | None = Query(
        None, alias="type", description="Filter by template type"
    ),
) -> EmailTemplateListResponse:
    """List templates, newest first."""
    templates = await service.list_templates(template_type)
    return EmailTemplateListResponse(
        items=[EmailTemplateResponse.model_validate(t) for t in templates]
    )


@router.post(
    "",
    response_model=EmailTemplateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create email template",
)
@require_permission("email", "update")
async def create_template(
    data: EmailTemplateCreate,
    service: EmailTemplateSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> EmailTemplateResponse:
    """Create a template."""
    return EmailTemplateResponse.model_validate(await service.create_template(data))


@router.get("/{template_id}", response_model=EmailTemplateResponse, summary="Get email template")
@require_permission("email", "read")
async def get_template(
    template_id: UUID,
    service: EmailTemplateSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> EmailTemplateResponse:
    """Get a template by ID."""
    return EmailTemplateResponse.model_validate(await service.get_template(template_id))


@router.put(
    "/{template_id}",
    response_model=EmailTemplateResponse,
    summary="Update email template",
)
@require_permission("email", "update")
async def update_template(
    template_id: UUID,
    data: EmailTemplateUpdate,
    service: EmailTemplateSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> EmailTemplateResponse:
    """Replace a template's content."""
    return EmailTemplateResponse.model_validate(await service.update_template(template_id, data))


@router.patch(
    "/{template_id}/status",
    response_model=EmailTemplateResponse,
    summary="Activate or deactivate email template",
)
@require_permission("email", "update")
async def set_template_status(
    template_id: UUID,
    data: TemplateStatusUpdate,
    service: EmailTemplateSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> EmailTemplateResponse:
    template = await service.set_active(template_id, data.is_active)
    return EmailTemplateResponse.model_validate(template)


@router.post(
    "/{template_id}/preview",
    response_model=PreviewResponse,
    summary="Preview email template",
    description="Renders the template with sample values; nothing is sent.",
)
@require_permission("email", "read")
async def preview_template(
    template_id: UUID,
    data: PreviewRequest,
    service: EmailTemplateSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> PreviewResponse:
    return await service.preview(template_id, data.values)


@router.delete(
    "/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete email template",
)
@require_permission("email", "update")
async def delete_template(
    template_id: UUID,
    service: EmailTemplateSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> None:
    """Delete a template."""
    await service.delete_template(template_id)

"""Form builder API routes."""

from uuid import UUID

from fastapi import status

from hireboard.api.dependencies import DBSession
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.permissions import require_permission
from hireboard.modules.forms import router
from hireboard.modules.forms.schemas import (
    FormCreate,
    FormListResponse,
    FormResponse,
    FormUpdate,
)
from hireboard.modules.forms.services import FormSvc


@router.get("", response_model=FormListResponse, summary="List forms")
@require_permission("forms", "read")
async def list_forms(
    service: FormSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> FormListResponse:
    """List forms with their fields, newest first."""
    forms = await service.list_forms()
    return FormListResponse(items=[FormResponse.model_validate(f) for f in forms])


@router.post(
    "",
    response_model=FormResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create form",
)
@require_permission("forms", "create")
async def create_form(
    data: FormCreate,
    service: FormSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> FormResponse:
    """Create a form."""
    return FormResponse.model_validate(await service.create_form(data))


@router.get("/{form_id}", response_model=FormResponse, summary="Get form")
@require_permission("forms", "read")
async def get_form(
    form_id: UUID,
    service: FormSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> FormResponse:
    """Get a form by ID."""
    return FormResponse.model_validate(await service.get_form(form_id))


@router.put(
    "/{form_id}",
    response_model=FormResponse,
    summary="Update form",
    description="Fields in the request replace the form's existing fields.",
)
@require_permission("forms", "update")
async def update_form(
    form_id: UUID,
    data: FormUpdate,
    service: FormSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> FormResponse:
    """Update a form."""
    return FormResponse.model_validate(await service.update_form(form_id, data))


@router.delete(
    "/{form_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete form",
)
@require_permission("forms", "delete")
async def delete_form(
    form_id: UUID,
    service: FormSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> None:
    """Delete a form that no job uses."""
    await service.delete_form(form_id)

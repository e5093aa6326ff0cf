"""Form builder service."""

import re
from typing import Annotated
from uuid import UUID

from fastapi import Depends

from hireboard.core.errors import BadRequestError, NotFoundError
from hireboard.modules.forms.models import Form, FormField
from hireboard.modules.forms.repos import FormRepo
from hireboard.modules.forms.schemas import FormCreate, FormFieldInput, FormUpdate


def field_name_from_label(label: str) -> str:
    """Derive a field's machine name: lowercase, whitespace runs become ``_``."""
    return re.sub(r"\s+", "_", label.lower())


def build_fields(fields: list[FormFieldInput]) -> list[FormField]:
    return [
        FormField(
            field_name=field_name_from_label(field.label),
            field_type=field.field_type.value,
            label=field.label,
            placeholder=field.placeholder,
            options=field.options,
            css_class=field.css_class,
            field_id=field.field_id,
            field_width=field.field_width,
            is_required=field.is_required,
            order=index,
        )
        for index, field in enumerate(fields)
    ]


class FormService:
    """Service for application form management."""

    def __init__(self, repo: FormRepo) -> None:
        self.repo = repo

    async def list_forms(self) -> list[Form]:
        return await self.repo.list_all()

    async def get_form(self, form_id: UUID) -> Form:
        """Get a form by ID.

        Raises:
            NotFoundError: If form not found
        """
        form = await self.repo.get_by_id(form_id)
        if not form:
            raise NotFoundError(
                "Form not found",
                resource="form",
                resource_id=str(form_id),
            )
        return form

    async def create_form(self, data: FormCreate) -> Form:
        """Create a form; a new default form takes the flag from the others."""
        if data.is_default:
            await self.repo.clear_default()

        form = Form(
            name=data.name,
            description=data.description,
            is_default=data.is_default,
            fields=build_fields(data.fields),
        )
        return await self.repo.create(form)

    async def update_form(self, form_id: UUID, data: FormUpdate) -> Form:
        """Update a form, replacing its fields.

        Raises:
            NotFoundError: If form not found
        """
        form = await self.get_form(form_id)

        if data.is_default:
            await self.repo.clear_default(except_id=form.id)

        form.name = data.name
        form.description = data.description
        form.is_default = data.is_default
        form.fields = build_fields(data.fields)

        return await self.repo.update(form)

    async def delete_form(self, form_id: UUID) -> None:
        """Delete a form no job uses.

        Raises:
            NotFoundError: If form not found
            BadRequestError: If a job still references the form
        """
        form = await self.get_form(form_id)

        job_count = await self.repo.count_jobs_using(form.id)
        if job_count:
            raise BadRequestError(
                "Form is used by one or more jobs",
                error_code="form_in_use",
                details={"job_count": job_count},
            )

        await self.repo.delete(form)


# Type alias for dependency injection
FormSvc = Annotated[FormService, Depends(FormService)]

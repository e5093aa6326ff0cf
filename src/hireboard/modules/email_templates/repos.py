"""Email template repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select

from hireboard.api.dependencies import DBSession
from hireboard.modules.email_templates.models import EmailTemplate


class EmailTemplateRepository:
    """Repository for EmailTemplate database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_by_id(self, template_id: UUID) -> EmailTemplate | None:
        stmt = select(EmailTemplate).where(EmailTemplate.id == template_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> EmailTemplate | None:
        stmt = select(EmailTemplate).where(EmailTemplate.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self, template_type: str | None = None) -> list[EmailTemplate]:
        """List templates, newest first."""
        stmt = select(EmailTemplate).order_by(EmailTemplate.created_at.desc(), EmailTemplate.name)
        if template_type:
            stmt = stmt.where(EmailTemplate.type == template_type)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, template: EmailTemplate) -> EmailTemplate:
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def update(self, template: EmailTemplate) -> EmailTemplate:
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def delete(self, template: EmailTemplate) -> None:
        await self.session.delete(template)
        await self.session.flush()


# Type alias for dependency injection
EmailTemplateRepo = Annotated[EmailTemplateRepository, Depends(EmailTemplateRepository)]

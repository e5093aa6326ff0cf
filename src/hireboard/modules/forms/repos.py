"""Form repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import func, select, update

from hireboard.api.dependencies import DBSession
from hireboard.modules.forms.models import Form
from hireboard.modules.jobs.models import Job


class FormRepository:
    """Repository for Form database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_by_id(self, form_id: UUID) -> Form | None:
        stmt = select(Form).where(Form.id == form_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Form]:
        """List forms, newest first."""
        stmt = select(Form).order_by(Form.created_at.desc(), Form.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def clear_default(self, except_id: UUID | None = None) -> None:
        """Unset ``is_default`` on every form other than ``except_id``."""
        stmt = update(Form).where(Form.is_default == True)  # noqa: E712
        if except_id is not None:
            stmt = stmt.where(Form.id != except_id)
        await self.session.execute(
            stmt.values(is_default=False).execution_options(synchronize_session="fetch")
        )

    async def count_jobs_using(self, form_id: UUID) -> int:
        stmt = select(func.count()).select_from(Job).where(Job.form_id == form_id)
        return (await self.session.execute(stmt)).scalar_one()

    async def create(self, form: Form) -> Form:
        self.session.add(form)
        await self.session.flush()
        await self.session.refresh(form)
        return form

    async def update(self, form: Form) -> Form:
        await self.session.flush()
        await self.session.refresh(form)
        return form

    async def delete(self, form: Form) -> None:
        await self.session.delete(form)
        await self.session.flush()


# Type alias for dependency injection
FormRepo = Annotated[FormRepository, Depends(FormRepository)]

"""Unit tests for EmailTemplateService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from hireboard.core.errors import ConflictError, NotFoundError
from hireboard.modules.email_templates.models import EmailTemplate, TemplateType
from hireboard.modules.email_templates.schemas import EmailTemplateCreate, EmailTemplateUpdate
from hireboard.modules.email_templates.services import EmailTemplateService


pytestmark = pytest.mark.unit


def make_template(**kwargs) -> EmailTemplate:
    defaults = {
        "id": uuid4(),
        "name": "Application Received",
        "type": TemplateType.APPLICATION_RECEIVED.value,
        "subject": "Received - {{job_title}}",
        "body": "<p>Dear {{applicant_name}}</p>",
        "variables": ["job_title", "applicant_name"],
        "is_active": True,
    }
    return EmailTemplate(**(defaults | kwargs))


def make_service() -> EmailTemplateService:
    repo = AsyncMock()
    repo.get_by_name.return_value = None
    repo.create.side_effect = lambda t: t
    repo.update.side_effect = lambda t: t
    return EmailTemplateService(repo=repo)


class TestCreateTemplate:
    async def test_variables_are_extracted(self):
        service = make_service()
        data = EmailTemplateCreate(
            name="Interview",
            type=TemplateType.INTERVIEW_SCHEDULED,
            subject="Interview for {{job_title}}",
            body="<p>{{applicant_name}}, see you on {{interview_date}}.</p>",
        )

        template = await service.create_template(data)

        assert template.type == "INTERVIEW_SCHEDULED"
        assert template.variables == ["job_title", "applicant_name", "interview_date"]
        assert template.is_active is True

    async def test_duplicate_name(self):
        service = make_service()
        service.repo.get_by_name.return_value = make_template()
        data = EmailTemplateCreate(
            name="Application Received",
            type=TemplateType.APPLICATION_RECEIVED,
            subject="s",
            body="b",
        )

        with pytest.raises(ConflictError) as exc_info:
            await service.create_template(data)

        assert exc_info.value.error_code == "template_exists"
        service.repo.create.assert_not_awaited()


class TestUpdateTemplate:
    async def test_keeping_own_name_is_allowed(self):
        template = make_template()
        service = make_service()
        service.repo.get_by_id.return_value = template
        service.repo.get_by_name.return_value = template

        updated = await service.update_template(
            template.id,
            EmailTemplateUpdate(
                name=template.name,
                type=TemplateType.APPLICATION_RECEIVED,
                subject="Thanks, {{applicant_name}}",
                body="<p>We got it.</p>",
                is_active=False,
            ),
        )

        assert updated.variables == ["applicant_name"]
        assert updated.is_active is False

    async def test_missing_template(self):
        service = make_service()
        service.repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.set_active(uuid4(), False)


class TestPreview:
    async def test_reports_missing_values(self):
        template = make_template()
        service = make_service()
        service.repo.get_by_id.return_value = template

        preview = await service.preview(template.id, {"job_title": "QA Engineer"})

        assert preview.subject == "Received - QA Engineer"
        assert preview.body == "<p>Dear {{applicant_name}}</p>"
        assert preview.missing == ["applicant_name"]

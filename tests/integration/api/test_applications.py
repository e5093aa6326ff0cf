"""Integration tests for application intake and review endpoints."""

import csv
import json
from datetime import UTC, datetime
from io import StringIO

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from hireboard.modules.applications.models import Application
from hireboard.modules.forms.models import Form, FormField
from hireboard.modules.jobs.models import Job, JobStatus
from hireboard.modules.users.models import User
from tests.factories import JobFactory


pytestmark = pytest.mark.integration


@pytest.fixture
async def form(db: AsyncSession) -> Form:
    form = Form(
        name="Developer Application",
        fields=[
            FormField(field_name="full_name", field_type="TEXT", label="Full Name", order=0),
            FormField(
                field_name="email_address",
                field_type="EMAIL",
                label="Email Address",
                is_required=True,
                order=1,
            ),
            FormField(
                field_name="phone",
                field_type="PHONE",
                label="Phone",
                field_id="phone-input",
                order=2,
            ),
            FormField(field_name="resume", field_type="FILE", label="Resume", order=3),
        ],
    )
    db.add(form)
    await db.flush()
    await db.refresh(form)
    return form


@pytest.fixture
async def job(db: AsyncSession, form: Form) -> Job:
    job = JobFactory.build(title="Python Developer", form_id=form.id)
    db.add(job)
    await db.flush()
    await db.refresh(job)
    return job


@pytest.fixture
def make_application(db: AsyncSession, job: Job):
    async def _make_application(**kwargs) -> Application:
        application = Application(
            job_id=job.id,
            candidate_name=kwargs.pop("candidate_name", "Asha Rao"),
            form_data=kwargs.pop("form_data", {"Full Name": "Asha Rao"}),
            **kwargs,
        )
        db.add(application)
        await db.flush()
        await db.refresh(application)
        return application

    return _make_application


def field_ids(form: Form) -> dict[str, str]:
    return {field.label: str(field.id) for field in form.fields}


class TestSubmitApplication:
    async def test_submit_without_auth(
        self,
        client: AsyncClient,
        admin_headers,
        job: Job,
        form: Form,
    ):
        ids = field_ids(form)
        response = await client.post(
            "/api/v1/applications",
            json={
                "job_id": str(job.id),
                "form_data": {
                    ids["Full Name"]: "Asha Rao",
                    ids["Email Address"]: "asha@example.com",
                    "phone-input": "+91 98765 43210",
                    ids["Resume"]: json.dumps(
                        {"fileName": "asha.pdf", "path": "/uploads/resumes/asha.pdf"}
                    ),
                    "q-notice": "30 days",
                    "portfolioLinks": ["https://github.com/asha"],
                },
                "field_labels": {"q-notice": "Notice Period"},
            },
            headers={
                "Referer": "https://careers.example.com/jobs/python",
                "User-Agent": "Mozilla/5.0 (X11; Linux x86_64)",
                "X-Forwarded-For": "203.0.113.7, 10.0.0.1",
            },
        )

        assert response.status_code == 201
        created = response.json()
        assert created["status"] == "PENDING"

        detail = await client.get(
            f"/api/v1/applications/{created['id']}",
            headers=admin_headers,
        )
        data = detail.json()
        assert data["job_title"] == "Python Developer"
        assert data["candidate_name"] == "Asha Rao"
        assert data["candidate_email"] == "asha@example.com"
        assert data["candidate_phone"] == "+91 98765 43210"
        assert data["resume_file_name"] == "asha.pdf"
        assert data["resume_path"] == "/uploads/resumes/asha.pdf"
        assert data["form_data"]["Notice Period"] == "30 days"
        assert data["form_data"]["Portfolio Links"] == ["https://github.com/asha"]
        assert data["source_domain"] == "careers.example.com"
        assert data["source_url"] == "https://careers.example.com/jobs/python"
        assert data["ip_address"] == "203.0.113.7"
        assert data["user_agent"] == "Mozilla/5.0 (X11; Linux x86_64)"
        assert data["is_archived"] is False

    async def test_origin_used_without_referer(self, client: AsyncClient, job: Job, form: Form):
        ids = field_ids(form)
        response = await client.post(
            "/api/v1/applications",
            json={"job_id": str(job.id), "form_data": {ids["Email Address"]: "a@example.com"}},
            headers={"Origin": "https://partner.example.org"},
        )

        assert response.status_code == 201

    async def test_missing_required_field(self, client: AsyncClient, job: Job, form: Form):
        ids = field_ids(form)
        response = await client.post(
            "/api/v1/applications",
            json={
                "job_id": str(job.id),
                "form_data": {ids["Full Name"]: "Asha Rao", ids["Email Address"]: "  "},
            },
        )

        assert response.status_code == 422
        assert response.json()["errors"] == [
            {"field": "Email Address", "message": "This field is required"}
        ]

    @pytest.mark.parametrize("status", [JobStatus.PAUSED, JobStatus.CLOSED, JobStatus.DRAFT])
    async def test_job_not_accepting(
        self,
        client: AsyncClient,
        db: AsyncSession,
        job: Job,
        status: JobStatus,
    ):
        job.status = status.value
        await db.flush()

        response = await client.post(
            "/api/v1/applications",
            json={"job_id": str(job.id), "form_data": {}},
        )

        assert response.status_code == 400
        assert response.json()["type"].endswith("/job_not_accepting")

    async def test_unknown_job(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/applications",
            json={"job_id": "00000000-0000-0000-0000-000000000000", "form_data": {}},
        )

        assert response.status_code == 404


class TestListApplications:
    async def test_archived_hidden_by_default(
        self,
        client: AsyncClient,
        viewer_headers,
        make_application,
    ):
        visible = await make_application()
        hidden = await make_application(is_archived=True, archived_at=datetime.now(UTC))

        default = await client.get("/api/v1/applications", headers=viewer_headers)
        archived = await client.get(
            "/api/v1/applications",
            params={"archived_only": True},
            headers=viewer_headers,
        )
        everything = await client.get(
            "/api/v1/applications",
            params={"include_archived": True},
            headers=viewer_headers,
        )

        assert [a["id"] for a in default.json()["items"]] == [str(visible.id)]
        assert [a["id"] for a in archived.json()["items"]] == [str(hidden.id)]
        assert everything.json()["total"] == 2

    async def test_status_filter(self, client: AsyncClient, viewer_headers, make_application):
        await make_application()
        shortlisted = await make_application(status="SHORTLISTED")

        response = await client.get(
            "/api/v1/applications",
            params={"status": "SHORTLISTED"},
            headers=viewer_headers,
        )

        assert [a["id"] for a in response.json()["items"]] == [str(shortlisted.id)]

    async def test_requires_applications_read(
        self,
        client: AsyncClient,
        make_user,
        auth_headers,
    ):
        user = await make_user()

        response = await client.get("/api/v1/applications", headers=auth_headers(user))

        assert response.status_code == 403


class TestExportApplications:
    async def test_hr_downloads_csv(
        self,
        client: AsyncClient,
        hr_user: User,
        auth_headers,
        make_application,
    ):
        await make_application(candidate_name="Asha Rao", candidate_email="asha@example.com")
        await make_application(
            candidate_name="Hidden", is_archived=True, archived_at=datetime.now(UTC)
        )

        response = await client.get(
            "/api/v1/applications/export",
            headers=auth_headers(hr_user),
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert response.headers["content-disposition"].startswith("attachment; filename=")
        rows = list(csv.DictReader(StringIO(response.text)))
        assert [r["candidate_name"] for r in rows] == ["Asha Rao"]
        assert rows[0]["job_title"] == "Python Developer"
        assert rows[0]["candidate_email"] == "asha@example.com"

    async def test_archive_filter(self, client: AsyncClient, admin_headers, make_application):
        await make_application(candidate_name="Inbox")
        await make_application(
            candidate_name="Archived", is_archived=True, archived_at=datetime.now(UTC)
        )

        response = await client.get(
            "/api/v1/applications/export",
            params={"archived_only": True},
            headers=admin_headers,
        )

        rows = list(csv.DictReader(StringIO(response.text)))
        assert [r["candidate_name"] for r in rows] == ["Archived"]

    @pytest.mark.parametrize("role_fixture", ["manager_user", "viewer_user"])
    async def test_read_alone_is_not_enough(
        self,
        client: AsyncClient,
        auth_headers,
        request: pytest.FixtureRequest,
        role_fixture: str,
        manager_user,
        viewer_user,
    ):
        user = request.getfixturevalue(role_fixture)

        response = await client.get(
            "/api/v1/applications/export",
            headers=auth_headers(user),
        )

        assert response.status_code == 403

    async def test_export_without_read_is_denied(
        self,
        client: AsyncClient,
        make_role,
        make_user,
        auth_headers,
    ):
        user = await make_user(await make_role("Exporter", {"applications:export": True}))

        response = await client.get(
            "/api/v1/applications/export",
            headers=auth_headers(user),
        )

        assert response.status_code == 403


class TestReviewApplication:
    async def test_update_status_with_remarks(
        self,
        client: AsyncClient,
        manager_user: User,
        auth_headers,
        make_application,
    ):
        application = await make_application()

        response = await client.patch(
            f"/api/v1/applications/{application.id}/status",
            json={"status": "SHORTLISTED", "remarks": "Strong portfolio"},
            headers=auth_headers(manager_user),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "SHORTLISTED"
        assert response.json()["remarks"] == "Strong portfolio"

    async def test_update_status_keeps_remarks(
        self,
        client: AsyncClient,
        admin_headers,
        make_application,
    ):
        application = await make_application(remarks="Call back Monday")

        response = await client.patch(
            f"/api/v1/applications/{application.id}/status",
            json={"status": "UNDER_REVIEW"},
            headers=admin_headers,
        )

        assert response.json()["remarks"] == "Call back Monday"

    async def test_invalid_status(self, client: AsyncClient, admin_headers, make_application):
        application = await make_application()

        response = await client.patch(
            f"/api/v1/applications/{application.id}/status",
            json={"status": "HIRED"},
            headers=admin_headers,
        )

        assert response.status_code == 422

    async def test_viewer_cannot_update(self, client: AsyncClient, viewer_headers, make_application):
        application = await make_application()

        response = await client.patch(
            f"/api/v1/applications/{application.id}/status",
            json={"status": "REJECTED"},
            headers=viewer_headers,
        )

        assert response.status_code == 403


class TestArchive:
    async def test_archive_and_unarchive(
        self,
        client: AsyncClient,
        manager_user: User,
        auth_headers,
        make_application,
    ):
        application = await make_application()
        headers = auth_headers(manager_user)

        archived = await client.patch(
            f"/api/v1/applications/{application.id}/archive",
            json={"is_archived": True},
            headers=headers,
        )
        assert archived.status_code == 200
        assert archived.json()["is_archived"] is True
        assert archived.json()["archived_at"] is not None
        assert archived.json()["archived_by"] == str(manager_user.id)

        restored = await client.patch(
            f"/api/v1/applications/{application.id}/archive",
            json={"is_archived": False},
            headers=headers,
        )
        assert restored.json()["is_archived"] is False
        assert restored.json()["archived_at"] is None
        assert restored.json()["archived_by"] is None

    async def test_bulk_archive_only_changes_differing_rows(
        self,
        client: AsyncClient,
        admin_headers,
        make_application,
    ):
        first = await make_application()
        second = await make_application()
        already = await make_application(is_archived=True, archived_at=datetime.now(UTC))

        response = await client.post(
            "/api/v1/applications/bulk-archive",
            json={
                "application_ids": [str(first.id), str(second.id), str(already.id)],
                "is_archived": True,
            },
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "updated_count": 2,
            "message": "2 application(s) archived successfully",
        }
        listed = await client.get(
            "/api/v1/applications",
            params={"archived_only": True},
            headers=admin_headers,
        )
        assert listed.json()["total"] == 3

    async def test_bulk_unarchive(self, client: AsyncClient, admin_headers, make_application):
        archived = await make_application(is_archived=True, archived_at=datetime.now(UTC))

        response = await client.post(
            "/api/v1/applications/bulk-archive",
            json={"application_ids": [str(archived.id)], "is_archived": False},
            headers=admin_headers,
        )

        assert response.json()["updated_count"] == 1
        assert response.json()["message"] == "1 application(s) unarchived successfully"

    async def test_bulk_archive_requires_ids(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/applications/bulk-archive",
            json={"application_ids": [], "is_archived": True},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["type"].endswith("/no_applications_selected")


class TestDeleteApplication:
    async def test_manager_cannot_delete(
        self,
        client: AsyncClient,
        manager_user: User,
        auth_headers,
        make_application,
    ):
        application = await make_application()

        response = await client.delete(
            f"/api/v1/applications/{application.id}",
            headers=auth_headers(manager_user),
        )

        assert response.status_code == 403

    async def test_hr_can_delete(
        self,
        client: AsyncClient,
        admin_headers,
        hr_user: User,
        auth_headers,
        make_application,
    ):
        application = await make_application()

        response = await client.delete(
            f"/api/v1/applications/{application.id}",
            headers=auth_headers(hr_user),
        )

        assert response.status_code == 204
        follow_up = await client.get(
            f"/api/v1/applications/{application.id}",
            headers=admin_headers,
        )
        assert follow_up.status_code == 404

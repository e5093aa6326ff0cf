"""Unit tests for the dashboard activity feed."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from hireboard.core.permissions.models import Role
from hireboard.modules.applications.models import Application
from hireboard.modules.dashboard.schemas import ActivityType
from hireboard.modules.dashboard.services import (
    ACTIVITY_LIMIT,
    NEW_USER_WINDOW,
    DashboardService,
    application_activity,
    candidate_display_name,
    job_activity,
    user_activity,
)
from hireboard.modules.jobs.models import Job
from hireboard.modules.users.models import User


pytestmark = pytest.mark.unit

NOW = datetime(2024, 5, 10, 12, 0, tzinfo=UTC)


def make_application(minutes_ago: int = 0, **kwargs) -> Application:
    return Application(
        id=uuid4(),
        job=Job(title="Python Developer"),
        form_data=kwargs.pop("form_data", {}),
        created_at=NOW - timedelta(minutes=minutes_ago),
        **kwargs,
    )


class TestCandidateDisplayName:
    def test_prefers_extracted_name(self):
        application = make_application(candidate_name="Asha Rao", form_data={"Name": "Other"})

        assert candidate_display_name(application) == "Asha Rao"

    @pytest.mark.parametrize("label", ["Full Name", "Name", "name", "candidateName"])
    def test_falls_back_to_form_data(self, label: str):
        application = make_application(form_data={label: " Ravi "})

        assert candidate_display_name(application) == "Ravi"

    def test_unknown(self):
        assert candidate_display_name(make_application(form_data={"Name": ["x"]})) == "Unknown"


class TestActivityItems:
    def test_application(self):
        application = make_application(candidate_name="Asha Rao")

        item = application_activity(application)

        assert item.id == f"app-{application.id}"
        assert item.type is ActivityType.APPLICATION
        assert item.title == "New Application Received"
        assert item.description == "Asha Rao applied for Python Developer"

    def test_job_without_creator(self):
        job = Job(id=uuid4(), title="Sales Lead", created_at=NOW)

        item = job_activity(job)

        assert item.id == f"job-{job.id}"
        assert item.description == 'Unknown posted "Sales Lead"'

    def test_user_with_role(self):
        user = User(id=uuid4(), name="Meera", role=Role(name="Manager"), created_at=NOW)

        item = user_activity(user)

        assert item.id == f"user-{user.id}"
        assert item.description == "Meera joined as Manager"


class TestRecentActivity:
    async def test_merged_newest_first_and_capped(self):
        repo = AsyncMock()
        repo.recent_applications.return_value = [
            make_application(minutes_ago=m, candidate_name=f"C{m}") for m in range(0, 50, 10)
        ]
        repo.recent_jobs.return_value = [
            Job(id=uuid4(), title=f"Job {m}", created_at=NOW - timedelta(minutes=m))
            for m in (5, 15, 25)
        ]
        repo.users_created_since.return_value = [
            User(id=uuid4(), name=f"U{m}", created_at=NOW - timedelta(minutes=m))
            for m in (1, 2, 3)
        ]

        items = await DashboardService(repo=repo).recent_activity(now=NOW)

        assert len(items) == ACTIVITY_LIMIT
        timestamps = [item.timestamp for item in items]
        assert timestamps == sorted(timestamps, reverse=True)
        assert items[0].id.startswith("app-")
        repo.users_created_since.assert_awaited_once_with(NOW - NEW_USER_WINDOW, 3)

"""Unit tests for the model factories."""

from datetime import UTC, datetime, timedelta

import pytest

from tests.factories import JobFactory, UserFactory


pytestmark = pytest.mark.unit


def test_user_factory_leaves_role_unset():
    user = UserFactory.build(role_id=None)

    assert user.role is None
    assert user.role_id is None


def test_job_factory_leaves_relationships_unset():
    job = JobFactory.build(creator_id=None, assignee_id=None, form_id=None)

    assert job.creator is None
    assert job.assignee is None
    assert job.form is None


@pytest.mark.parametrize("factory", [UserFactory, JobFactory])
def test_timestamps_are_current(factory):
    instance = factory.build()

    assert datetime.now(UTC) - instance.created_at < timedelta(minutes=1)
    assert datetime.now(UTC) - instance.updated_at < timedelta(minutes=1)

"""Test factories."""

from tests.factories.job import JobCreateFactory, JobFactory
from tests.factories.user import (
    TEST_PASSWORD,
    TEST_PASSWORD_HASH,
    UserCreateFactory,
    UserFactory,
)


__all__ = [
    "TEST_PASSWORD",
    "TEST_PASSWORD_HASH",
    "JobCreateFactory",
    "JobFactory",
    "UserCreateFactory",
    "UserFactory",
]

"""Job factories for tests."""

from datetime import UTC, datetime
from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory
from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from hireboard.modules.jobs.models import Job, JobStatus
from hireboard.modules.jobs.schemas import JobCreate


class JobFactory(SQLAlchemyFactory[Job]):
    """Factory for creating test Job instances.

    Links to forms and users are left empty; pass ``form_id=`` etc. to set them.
    """

    __model__ = Job
    __set_relationships__ = False

    @classmethod
    def title(cls) -> str:
        return f"Backend Engineer {uuid4().hex[:4]}"

    @classmethod
    def description(cls) -> str:
        return "Build and run the services behind our careers platform."

    @classmethod
    def position(cls) -> str:
        return "Senior"

    @classmethod
    def department(cls) -> None:
        return None

    @classmethod
    def location(cls) -> str:
        return "Remote"

    @classmethod
    def status(cls) -> str:
        """Default to accepting applications."""
        return JobStatus.ACTIVE.value

    @classmethod
    def form_id(cls) -> None:
        return None

    @classmethod
    def creator_id(cls) -> None:
        return None

    @classmethod
    def assignee_id(cls) -> None:
        return None

    @classmethod
    def image_url(cls) -> None:
        return None

    @classmethod
    def banner_image_url(cls) -> None:
        return None

    @classmethod
    def embed_code(cls) -> None:
        return None


    @classmethod
    def created_at(cls) -> datetime:
        """Rows look freshly inserted, like the server default."""
        return datetime.now(UTC)

    @classmethod
    def updated_at(cls) -> datetime:
        return datetime.now(UTC)


class JobCreateFactory(ModelFactory[JobCreate]):
    """Factory for creating JobCreate schemas."""

    __model__ = JobCreate

    @classmethod
    def title(cls) -> str:
        return f"Product Designer {uuid4().hex[:4]}"

    @classmethod
    def description(cls) -> str:
        return "Design the candidate experience from job search to offer."

    @classmethod
    def position(cls) -> str:
        return "Mid-level"

    @classmethod
    def status(cls) -> JobStatus:
        return JobStatus.ACTIVE

    @classmethod
    def form_id(cls) -> None:
        return None

    @classmethod
    def assignee_id(cls) -> None:
        return None

    @classmethod
    def image_url(cls) -> None:
        return None

    @classmethod
    def banner_image_url(cls) -> None:
        return None

"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hireboard.core.auth.backend import create_access_token
from hireboard.core.database import Base, get_db
from hireboard.core.permissions.catalog import sync_catalog
from hireboard.core.permissions.evaluator import ADMINISTRATOR_ROLE_NAME
from hireboard.core.permissions.models import Permission, Role, RolePermission
from hireboard.main import create_app

# Import all models to ensure they're registered with Base.metadata
from hireboard.modules.applications.models import Application  # noqa: F401
from hireboard.modules.email_templates.models import EmailTemplate  # noqa: F401
from hireboard.modules.forms.models import Form, FormField  # noqa: F401
from hireboard.modules.jobs.models import Job  # noqa: F401
from hireboard.modules.settings.models import Setting  # noqa: F401
from hireboard.modules.users.models import User
from tests.factories import UserFactory


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

MakeUser = Callable[..., Awaitable[User]]


@pytest.fixture
async def engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests.

    The app under test shares this session, so rows created by fixtures are
    visible to requests and nothing is committed.
    """
    session_factory = async_sessionmaker(
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with engine.connect() as conn:
        await conn.begin()

        async with session_factory(bind=conn) as session:
            yield session

        await conn.rollback()


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Role and User Fixtures
# ============================================================


@pytest.fixture
async def roles(db: AsyncSession) -> dict[str, Role]:
    """Sync the permission catalog and return the system roles by name."""
    await sync_catalog(db)
    result = await db.execute(select(Role))
    return {role.name: role for role in result.scalars().all()}


@pytest.fixture
async def permissions(db: AsyncSession, roles: dict[str, Role]) -> dict[str, Permission]:  # noqa: ARG001
    """The synced catalog keyed by "module:action"."""
    result = await db.execute(select(Permission))
    return {p.key: p for p in result.scalars().all()}


@pytest.fixture
def make_user(db: AsyncSession) -> MakeUser:
    """Return a coroutine that persists a user, optionally holding ``role``."""

    async def _make_user(role: Role | None = None, **kwargs) -> User:
        user = UserFactory.build(role_id=role.id if role else None, **kwargs)
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_role(db: AsyncSession, permissions: dict[str, Permission]) -> Callable[..., Awaitable[Role]]:
    """Return a coroutine that persists a custom role.

    ``grants`` maps "module:action" to the granted flag.
    """

    async def _make_role(
        name: str,
        grants: dict[str, bool] | None = None,
        is_active: bool = True,
    ) -> Role:
        role = Role(
            name=name,
            is_system=False,
            is_active=is_active,
            permissions=[
                RolePermission(permission=permissions[key], granted=granted)
                for key, granted in (grants or {}).items()
            ],
        )
        db.add(role)
        await db.flush()
        await db.refresh(role)
        return role

    return _make_role


@pytest.fixture
async def admin_user(make_user: MakeUser, roles: dict[str, Role]) -> User:
    return await make_user(roles[ADMINISTRATOR_ROLE_NAME], email="admin@example.com")


@pytest.fixture
async def hr_user(make_user: MakeUser, roles: dict[str, Role]) -> User:
    return await make_user(roles["Human Resources"], email="hr@example.com")


@pytest.fixture
async def manager_user(make_user: MakeUser, roles: dict[str, Role]) -> User:
    return await make_user(roles["Manager"], email="manager@example.com")


@pytest.fixture
async def viewer_user(make_user: MakeUser, roles: dict[str, Role]) -> User:
    return await make_user(roles["Viewer"], email="viewer@example.com")


def bearer(user: User) -> dict[str, str]:
    """Authorization headers carrying a valid access token for ``user``."""
    token = create_access_token(user.id, email=user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Return a function building Authorization headers for a user."""
    return bearer


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    return bearer(admin_user)


@pytest.fixture
def viewer_headers(viewer_user: User) -> dict[str, str]:
    return bearer(viewer_user)


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"

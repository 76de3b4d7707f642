"""Pytest configuration and shared fixtures."""

import os


# Settings are read once at import; configure the test environment first.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TENANT_SESSION_ENABLED", "false")

from collections.abc import AsyncGenerator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool, StaticPool  # noqa: E402

from dealerdesk.core.auth.backend import create_access_token  # noqa: E402
from dealerdesk.core.database import get_db  # noqa: E402
from dealerdesk.core.tenancy import TenantDirectory  # noqa: E402
from dealerdesk.main import create_app  # noqa: E402

# Import all models to ensure they're registered with Base.metadata
from dealerdesk.models import Base, Tenant, User  # noqa: E402
from tests.factories import create_tenant, create_user  # noqa: E402


# In-memory SQLite unless a real database is given
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture
async def engine():
    """Create test database engine."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests.

    Each test runs in its own transaction that is rolled back
    after the test completes, ensuring test isolation.
    """
    session_factory = async_sessionmaker(
        bind=engine,
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
    """Create test application instance.

    The tenant resolver and the routes share the test session, so rows
    flushed by a fixture are visible to both.
    """

    @asynccontextmanager
    async def test_session():
        yield db

    application = create_app(tenant_directory=TenantDirectory(test_session, timeout=5))

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client addressing the ``acme`` tenant by subdomain."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://acme.app.example",
    ) as client:
        yield client


@pytest.fixture
async def bare_client(app) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client on the base domain, with no tenant in the host."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://app.example",
    ) as client:
        yield client


# ============================================================
# Tenant and User Fixtures
# ============================================================


@pytest.fixture
async def tenant(db: AsyncSession) -> Tenant:
    """The ``acme`` tenant most tests run against."""
    return await create_tenant(db, name="Acme Copiers", slug="acme")


@pytest.fixture
async def other_tenant(db: AsyncSession) -> Tenant:
    return await create_tenant(db, name="Globex Imaging", slug="globex")


@pytest.fixture
async def user(db: AsyncSession, tenant: Tenant) -> User:
    """A sales rep of the ``acme`` tenant, password ``DEFAULT_PASSWORD``."""
    return await create_user(db, tenant, email="rep@acme-copiers.com")


@pytest.fixture
def auth_headers(user: User, tenant: Tenant) -> dict[str, str]:
    """Generate authorization headers with a valid JWT token."""
    token = create_access_token(user_id=user.id, tenant_id=tenant.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def authenticated_client(
    app, auth_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """The ``acme`` client signed in as ``user``."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://acme.app.example",
        headers=auth_headers,
    ) as client:
        yield client

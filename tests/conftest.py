import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from manga_catalog.app import app  # noqa: E402
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository  # noqa: E402
from manga_catalog.domain.ports.repositories.user_repository import UserRepository  # noqa: E402
from manga_catalog.domain.ports.services.auth_service import AuthService  # noqa: E402
from manga_catalog.infrastructure.config.settings import Settings  # noqa: E402
from manga_catalog.infrastructure.persistence.database import get_session  # noqa: E402
from manga_catalog.infrastructure.persistence.models import table_registry  # noqa: E402

TEST_SECRET_KEY = os.environ["SECRET_KEY"]


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create an in-memory database engine shared by every connection"""
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        SECRET_KEY=TEST_SECRET_KEY,
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=30,
    )


# Shared fixtures for use case testing
@pytest.fixture
def mock_user_repository():
    """Mock user repository for use case testing"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_manga_repository():
    """Mock manga repository for use case testing"""
    return AsyncMock(spec=MangaRepository)


@pytest.fixture
def mock_auth_service():
    """Mock auth service for use case testing"""
    service = MagicMock(spec=AuthService)
    service.hash_password.side_effect = lambda password: f"hashed-{password}"
    service.verify_password.side_effect = lambda plain, hashed: hashed == f"hashed-{plain}"
    service.create_access_token.return_value = "signed-token"
    return service

"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fedid.infrastructure.persistence.sqlalchemy.models import Base
from fedid.presentation.api.app import API_V1_PREFIX, create_app
from fedid.presentation.api.dependencies import get_db_session
from fedid_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and cheap Argon2 costs."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        instance_host="example.com",
        database_url_override="sqlite+aiosqlite:///:memory:",
        api_debug=True,
        argon2_time_cost=1,
        argon2_memory_cost=8,
        argon2_parallelism=1,
        log_level="DEBUG",
    )


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client with an in-memory database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return TestClient(app)


@pytest.fixture
def alice_registration() -> dict:
    """Registration payload for alice."""
    return {
        "user_id": "alice",
        "password": "longenough1",
        "mail_address": "a@x.com",
        "display_name": "Alice",
    }


@pytest.fixture
def registered_alice(test_client, alice_registration, api_v1_prefix) -> dict:
    """Register alice and return the response body."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json=alice_registration,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_alice) -> dict:
    """Auth headers for alice."""
    return {"Authorization": f"Bearer {registered_alice['token']}"}

"""
Pytest configuration and shared fixtures.

Each test runs against its own in-memory SQLite database, wired into the
app through a ``get_db`` dependency override.
"""
import os

# Must be set before jobportal.core.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"

from typing import Dict

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import jobportal.models  # noqa: F401
from jobportal.core.database import Base, get_db
from jobportal.main import app


@pytest.fixture
async def engine():
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    """A session for calling services and repositories directly."""
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """HTTP client bound to the app and the test database."""

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def registration_data() -> Dict[str, str]:
    """Valid registration body."""
    return {
        "name": "Asha",
        "lastName": "Rao",
        "email": "asha@example.com",
        "password": "secret123",
    }


@pytest.fixture
def job_data() -> Dict[str, str]:
    """Valid create-job body."""
    return {
        "company": "Acme Inc.",
        "position": "Software Engineer",
        "workType": "full-time",
        "workLocation": "Mumbai",
    }


@pytest.fixture
def register_user(client):
    """Register a user through the API and return their token."""

    async def _register(email: str, password: str = "secret123", name: str = "Test") -> str:
        response = await client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()["token"]

    return _register


@pytest.fixture
async def auth_headers(register_user) -> Dict[str, str]:
    """Bearer headers for a freshly registered user."""
    token = await register_user("owner@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def other_headers(register_user) -> Dict[str, str]:
    """Bearer headers for a second, unrelated user."""
    token = await register_user("intruder@example.com")
    return {"Authorization": f"Bearer {token}"}

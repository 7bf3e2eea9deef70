import os
from typing import AsyncGenerator
from unittest.mock import patch

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Set test database URL before importing app
os.environ["DATABASE_URL"] = TEST_DATABASE_URL


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database with every table for each test."""
    from pinknail.core.database import entities  # noqa: F401
    from pinknail.core.database.base import Base

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async_session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="admin")
async def admin_fixture(session: AsyncSession):
    """Persist the admin that the authenticated client acts as."""
    from pinknail.core.database.entities.admins import Admin
    from pinknail.server.core.security import hash_secret

    admin = Admin(email="owner@pinknail.com", name="Salon Owner", password_hash=hash_secret("password123"))
    session.add(admin)
    await session.commit()
    await session.refresh(admin)
    return admin


async def _client_for(session: AsyncSession, headers: dict) -> AsyncGenerator[AsyncClient, None]:
    from pinknail.core.database import get_session
    from pinknail.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("pinknail.server.main.lifespan", mock_lifespan):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://localhost", headers=headers
        ) as client:
            yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, admin) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client that sends a valid admin access token."""
    from pinknail.server.core.security import create_token_pair

    access_token, _ = create_token_pair(admin)
    async for client in _client_for(session, {"Authorization": f"Bearer {access_token}"}):
        yield client


@pytest_asyncio.fixture(name="public_client")
async def public_client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client without admin credentials."""
    async for client in _client_for(session, {}):
        yield client

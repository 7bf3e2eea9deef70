"""Test configuration for database unit tests.

This module provides common fixtures for testing the centralized database
layer against in-memory SQLite.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pinknail.core.database import entities  # noqa: F401
from pinknail.core.database.base import Base
from pinknail.core.database.entities.services import Service


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    factory = async_sessionmaker(in_memory_engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest.fixture
async def saved_service(in_memory_session) -> Service:
    """A persisted service that bookings can reference."""
    service = Service(name="Gel Manicure", description="Long-lasting gel", price=45.0, duration=60, category="manicure")
    in_memory_session.add(service)
    await in_memory_session.commit()
    await in_memory_session.refresh(service)
    return service

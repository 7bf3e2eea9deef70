"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

# Create global engine and session factory
engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates any table from the entity metadata that does not exist yet.
    NOTE: In production, Alembic migrations own the schema; this keeps
    local development and SQLite setups usable without running them.
    """
    # Register every entity on the metadata before creating tables
    from . import entities  # noqa: F401

    await create_all(engine)

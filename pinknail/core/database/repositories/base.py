"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns and interfaces
used across all repository implementations in the centralized database layer.
Built with async SQLAlchemy sessions and SQLModel statements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from ..base import utc_now

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)

LIKE_ESCAPE = "\\"


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity record.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance
        """

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """


class SQLModelRepository(AsyncBaseRepository[EntityType]):
    """Default CRUD implementation shared by the table repositories.

    Subclasses only pass their entity class and add the queries that are
    specific to their table.
    """

    async def create(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def create_many(self, entities: Sequence[EntityType]) -> List[EntityType]:
        """Persist several entities in one transaction."""
        self.session.add_all(list(entities))
        await self.session.commit()
        for entity in entities:
            await self.session.refresh(entity)
        return list(entities)

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, entity: EntityType) -> EntityType:
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        stmt = select(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def paginate(self, stmt, page: int, limit: int) -> Tuple[List[EntityType], int]:
        """Run ``stmt`` for one page and count the rows of the unpaginated query.

        Args:
            stmt: Filtered and ordered select statement
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (entities on the page, total matching rows)
        """
        total = await QueryBuilder.count(self.session, stmt)
        paged = QueryBuilder.apply_pagination(stmt, limit, (page - 1) * limit)
        result = await self.session.execute(paged)
        return list(result.scalars().all()), total


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        ``None`` values and keys that are not columns of ``model`` are skipped.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_search(stmt, columns: Sequence[Any], term: Optional[str]):
        """Match ``term`` case-insensitively as a literal substring of any column."""
        if not term or not term.strip():
            return stmt
        pattern = f"%{escape_like(term.strip())}%"
        return stmt.where(or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns)))

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    async def count(session: AsyncSession, stmt) -> int:
        """Count the rows a select statement would return, ignoring its ordering."""
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        result = await session.execute(count_stmt)
        return int(result.scalar_one())


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )

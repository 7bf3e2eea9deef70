"""
Salon service repository.

This module provides data access for the service menu: lookups by name for
uniqueness checks and the filtered, paginated listing used by both the public
site and the admin dashboard.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.services import Service
from .base import QueryBuilder, SQLModelRepository


class ServiceRepository(SQLModelRepository[Service]):
    """Repository for salon services using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Service)

    async def get_by_name(self, name: str) -> Optional[Service]:
        stmt = select(Service).where(Service.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self,
        *,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
        is_active: Optional[bool] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Service], int]:
        """List services for one page.

        Args:
            category: Only services in this menu category
            featured: Only (non-)featured services
            is_active: Only active or only hidden services
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (services ordered by sort index then newest first, total)
        """
        stmt = select(Service)
        stmt = QueryBuilder.apply_filters(
            stmt, Service, {"category": category, "featured": featured, "is_active": is_active}
        )
        stmt = stmt.order_by(Service.sort_index.asc(), Service.created_at.desc())  # type: ignore
        return await self.paginate(stmt, page, limit)

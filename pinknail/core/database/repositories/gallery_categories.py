"""
Gallery category repository.

Lookups by slug and by case-insensitive name back the uniqueness rules of
categories; the listing feeds the gallery page tabs.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.gallery_categories import GalleryCategory
from .base import QueryBuilder, SQLModelRepository


class GalleryCategoryRepository(SQLModelRepository[GalleryCategory]):
    """Repository for gallery categories using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, GalleryCategory)

    async def get_by_slug(self, slug: str) -> Optional[GalleryCategory]:
        stmt = select(GalleryCategory).where(GalleryCategory.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[GalleryCategory]:
        """Get a category whose name equals ``name`` ignoring case."""
        stmt = select(GalleryCategory).where(func.lower(GalleryCategory.name) == name.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def search(
        self,
        *,
        is_active: Optional[bool] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 100,
    ) -> Tuple[List[GalleryCategory], int]:
        """List categories, optionally matching ``search`` in the name or slug."""
        stmt = select(GalleryCategory)
        stmt = QueryBuilder.apply_filters(stmt, GalleryCategory, {"is_active": is_active})
        stmt = QueryBuilder.apply_search(stmt, [GalleryCategory.name, GalleryCategory.slug], search)
        stmt = stmt.order_by(GalleryCategory.sort_index.asc(), GalleryCategory.created_at.desc())  # type: ignore
        return await self.paginate(stmt, page, limit)
